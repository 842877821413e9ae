from .alarms import AlarmFetcher, AlarmQuery, AlarmRecord, alarm_filter
from .aggregator import AlarmAggregator

__all__ = [
    "AlarmFetcher",
    "AlarmQuery",
    "AlarmRecord",
    "alarm_filter",
    "AlarmAggregator",
]
