"""InfluxDB line protocol rendering of Metric points."""

from datetime import datetime, timezone
from typing import Any

from .metric import Metric

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_MEASUREMENT_ESCAPES = str.maketrans({",": "\\,", " ": "\\ ", "\n": "\\n"})
_TAG_ESCAPES = str.maketrans({",": "\\,", "=": "\\=", " ": "\\ ", "\n": "\\n"})


def _escape_string_field(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def _format_field_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return f"{value}i"
    if isinstance(value, float):
        return repr(value)
    return f'"{_escape_string_field(str(value))}"'


def to_unix_nanos(tm: datetime) -> int:
    # Naive datetimes are taken as UTC
    if tm.tzinfo is None:
        tm = tm.replace(tzinfo=timezone.utc)
    delta = tm - _EPOCH
    return (delta.days * 86400 + delta.seconds) * 10**9 + delta.microseconds * 1000


def _trim(text: str) -> str:
    # A trailing backslash would escape the separator that follows
    return text.rstrip("\\")


def serialize(metric: Metric) -> str:
    """Render a metric as one line of InfluxDB line protocol (no newline)."""
    if not metric.fields:
        raise ValueError(f"Metric '{metric.name}' has no fields")

    parts = [_trim(metric.name).translate(_MEASUREMENT_ESCAPES)]
    for key in sorted(metric.tags):
        tag_key = _trim(key)
        tag_value = _trim(metric.tags[key])
        if tag_key == "" or tag_value == "":
            continue
        parts.append(f"{tag_key.translate(_TAG_ESCAPES)}={tag_value.translate(_TAG_ESCAPES)}")
    series = ",".join(parts)

    field_set = ",".join(
        f"{_trim(key).translate(_TAG_ESCAPES)}={_format_field_value(value)}"
        for key, value in sorted(metric.fields.items())
    )
    return f"{series} {field_set} {to_unix_nanos(metric.time)}"
