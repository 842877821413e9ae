from typing import Final

# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_LEVEL: Final[str] = "INFO"

# Polling
DEFAULT_POLL_INTERVAL: Final[float] = 120.0
