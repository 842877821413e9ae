"""AWS-specific constants used across the awsalarms package."""

from typing import Final, FrozenSet

PLUGIN_NAME: Final[str] = "awsalarms"

# CloudWatch alarm states
STATE_OK: Final[str] = "OK"
STATE_ALARM: Final[str] = "ALARM"
STATE_INSUFFICIENT_DATA: Final[str] = "INSUFFICIENT_DATA"
VALID_STATES: Final[FrozenSet[str]] = frozenset(
    {STATE_OK, STATE_ALARM, STATE_INSUFFICIENT_DATA}
)
DEFAULT_STATE_VALUE: Final[str] = STATE_ALARM

# Reserved for request throttling, not applied by the fetcher
DEFAULT_RATE_LIMIT: Final[int] = 25

# Metric point layout
STATE_FIELD: Final[str] = "State"
REGION_TAG: Final[str] = "region"
ALARM_ARN_TAG: Final[str] = "alarmArn"
METRIC_NAME_TAG: Final[str] = "metricName"
NAMESPACE_TAG: Final[str] = "namespace"

# Transport
CONNECT_TIMEOUT: Final[int] = 30
READ_TIMEOUT: Final[int] = 60
MAX_POOL_CONNECTIONS: Final[int] = 100
DEFAULT_ROLE_SESSION_NAME: Final[str] = "awsalarms"
