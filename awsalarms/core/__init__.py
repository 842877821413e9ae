from .config import CloudWatchAlarmsConfig
from .exceptions import (
    AWSAlarmsError,
    ConfigurationError,
    FetchError,
    FilterConstructionError,
    MalformedAlarmError,
    SessionError,
)
from .filter import IncludeExcludeFilter
from .session import create_cloudwatch_client, create_session

__all__ = [
    # Config related
    "CloudWatchAlarmsConfig",
    "IncludeExcludeFilter",
    # Session related
    "create_session",
    "create_cloudwatch_client",
    # Errors
    "AWSAlarmsError",
    "ConfigurationError",
    "FilterConstructionError",
    "FetchError",
    "MalformedAlarmError",
    "SessionError",
]
