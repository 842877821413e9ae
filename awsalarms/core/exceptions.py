class AWSAlarmsError(Exception):
    """Base exception for awsalarms package."""

    pass


class ConfigurationError(AWSAlarmsError):
    """Raised when there's a configuration error."""

    pass


class FilterConstructionError(ConfigurationError):
    """Raised when the tag include/exclude lists cannot be compiled."""

    pass


class SessionError(AWSAlarmsError):
    """Raised when session operations fail."""

    pass


class FetchError(AWSAlarmsError):
    """Raised when alarms cannot be fetched from CloudWatch."""

    pass


class MalformedAlarmError(AWSAlarmsError):
    """Raised when an alarm returned by CloudWatch lacks a required field."""

    pass
