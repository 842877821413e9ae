"""
awsalarms

Pulls CloudWatch alarm states and turns them into metric points:
- Paginated DescribeAlarms fetch
- One State point per alarm, tagged with its dimensions
- Line protocol output for a telemetry pipeline
"""

__version__ = "0.1.0"

from .core import (
    CloudWatchAlarmsConfig,
    ConfigurationError,
    FetchError,
    FilterConstructionError,
    MalformedAlarmError,
)
from .accumulator import Accumulator, LineProtocolAccumulator, MetricAccumulator
from .metric import Metric
from .plugin import CloudWatchAlarms
from .shim import Shim

__all__ = [
    # Plugin related
    "CloudWatchAlarms",
    "CloudWatchAlarmsConfig",
    "Shim",
    # Output related
    "Accumulator",
    "LineProtocolAccumulator",
    "MetricAccumulator",
    "Metric",
    # Errors
    "ConfigurationError",
    "FetchError",
    "FilterConstructionError",
    "MalformedAlarmError",
]
