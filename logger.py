import logging
import sys
from typing import Optional, TextIO


class LoggerSetup:
    def __init__(
        self,
        log_format: str,
        level: str = "INFO",
        stream: Optional[TextIO] = None,
    ):
        self.log_format = log_format
        self.level = level
        # stdout carries metrics, so logs default to stderr
        self.stream = stream or sys.stderr
        self.setup_logging()

    def setup_logging(self) -> None:
        """Setup logging configuration on the root logger."""
        root_logger = logging.getLogger()
        root_logger.setLevel(self.level)
        if not root_logger.handlers:
            handler = logging.StreamHandler(self.stream)
            formatter = logging.Formatter(self.log_format)
            handler.setFormatter(formatter)
            root_logger.addHandler(handler)
        # botocore is chatty at DEBUG
        logging.getLogger("botocore").setLevel(logging.WARNING)

    def get_logger(self, name: str) -> logging.Logger:
        return logging.getLogger(name) if name else logging.getLogger()
