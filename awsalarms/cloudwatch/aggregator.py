import logging
from typing import Any, Dict, Iterable, List, Optional

from ..accumulator import Accumulator
from ..core.constants import (
    ALARM_ARN_TAG,
    METRIC_NAME_TAG,
    NAMESPACE_TAG,
    REGION_TAG,
    STATE_FIELD,
)
from ..core.exceptions import MalformedAlarmError
from ..core.filter import IncludeExcludeFilter
from ..metric import Metric, SeriesGrouper
from .alarms import AlarmRecord

logger = logging.getLogger(__name__)


class AlarmAggregator:
    """Turns CloudWatch alarms into one State point per alarm."""

    def __init__(
        self, region: str, tag_filter: Optional[IncludeExcludeFilter] = None
    ) -> None:
        self.region = region
        self.tag_filter = tag_filter or IncludeExcludeFilter()

    def build_tags(self, record: AlarmRecord) -> Dict[str, str]:
        tags = {
            REGION_TAG: self.region,
            ALARM_ARN_TAG: record.arn,
            METRIC_NAME_TAG: record.metric_name,
            NAMESPACE_TAG: record.namespace,
        }
        # Dimensions overwrite fixed tags on name collision
        for name, value in record.dimensions.items():
            if self.tag_filter.match(name):
                tags[name] = value
        return tags

    def aggregate(
        self,
        alarms: Iterable[Dict[str, Any]],
        acc: Optional[Accumulator] = None,
    ) -> List[Metric]:
        """Group alarms into metrics.

        Malformed alarms are skipped and reported to ``acc`` when given.
        """
        grouper = SeriesGrouper()
        for alarm in alarms:
            try:
                record = AlarmRecord.from_dict(alarm)
            except MalformedAlarmError as e:
                logger.error(f"Skipping alarm: {e}")
                if acc is not None:
                    acc.add_error(e)
                continue

            grouper.add(
                record.name,
                self.build_tags(record),
                record.state_updated_timestamp,
                STATE_FIELD,
                record.state_value,
            )
        return grouper.metrics()

    def emit(self, acc: Accumulator, alarms: Iterable[Dict[str, Any]]) -> int:
        metrics = self.aggregate(alarms, acc)
        for metric in metrics:
            acc.add_metric(metric)
        return len(metrics)
