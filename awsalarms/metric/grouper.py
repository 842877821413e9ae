from datetime import datetime
from typing import Any, Dict, List, Mapping, Tuple

from .metric import Metric

SeriesKey = Tuple[str, Tuple[Tuple[str, str], ...], datetime]


class SeriesGrouper:
    """Coalesces fields for the same series and timestamp into one Metric.

    Metrics are returned in the order their series first appeared.
    """

    def __init__(self) -> None:
        self._metrics: Dict[SeriesKey, Metric] = {}

    @staticmethod
    def _key(name: str, tags: Mapping[str, str], tm: datetime) -> SeriesKey:
        return name, tuple(sorted(tags.items())), tm

    def add(
        self,
        name: str,
        tags: Mapping[str, str],
        tm: datetime,
        field: str,
        value: Any,
    ) -> None:
        key = self._key(name, tags, tm)
        metric = self._metrics.get(key)
        if metric is None:
            metric = Metric(name=name, tags=dict(tags), fields={}, time=tm)
            self._metrics[key] = metric
        metric.fields[field] = value

    def metrics(self) -> List[Metric]:
        return list(self._metrics.values())

    def __len__(self) -> int:
        return len(self._metrics)
