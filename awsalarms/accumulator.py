"""Output sinks for gathered metrics."""

import logging
import sys
from typing import List, Optional, Protocol, TextIO

from .metric import Metric, serialize

logger = logging.getLogger(__name__)


class Accumulator(Protocol):
    def add_metric(self, metric: Metric) -> None:
        ...

    def add_error(self, err: Exception) -> None:
        ...


class MetricAccumulator:
    """Collects metrics and errors in memory."""

    def __init__(self) -> None:
        self.metrics: List[Metric] = []
        self.errors: List[Exception] = []

    def add_metric(self, metric: Metric) -> None:
        self.metrics.append(metric)

    def add_error(self, err: Exception) -> None:
        logger.error(f"Error in plugin: {err}")
        self.errors.append(err)

    def has_measurement(self, name: str) -> bool:
        return any(m.name == name for m in self.metrics)


class LineProtocolAccumulator:
    """Writes every metric to a stream as InfluxDB line protocol."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream or sys.stdout
        self.error_count = 0

    def add_metric(self, metric: Metric) -> None:
        try:
            line = serialize(metric)
        except ValueError as e:
            self.add_error(e)
            return
        self.stream.write(line + "\n")
        self.stream.flush()

    def add_error(self, err: Exception) -> None:
        self.error_count += 1
        logger.error(f"Error in plugin: {err}")
