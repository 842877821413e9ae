from .metric import Metric
from .grouper import SeriesGrouper
from .serializer import serialize

__all__ = [
    "Metric",
    "SeriesGrouper",
    "serialize",
]
