import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List

from botocore.exceptions import BotoCoreError, ClientError

from ..core.constants import DEFAULT_STATE_VALUE
from ..core.exceptions import FetchError, MalformedAlarmError

logger = logging.getLogger(__name__)

REQUIRED_ALARM_KEYS = (
    "AlarmName",
    "AlarmArn",
    "MetricName",
    "Namespace",
    "StateValue",
    "StateUpdatedTimestamp",
)


@dataclass(frozen=True)
class AlarmQuery:
    """Request descriptor for a single DescribeAlarms fetch."""

    state_value: str = DEFAULT_STATE_VALUE

    def to_params(self) -> Dict[str, Any]:
        return {"StateValue": self.state_value}


@dataclass
class AlarmRecord:
    """Snapshot of a CloudWatch metric alarm."""

    name: str
    arn: str
    metric_name: str
    namespace: str
    state_value: str
    state_updated_timestamp: datetime
    dimensions: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AlarmRecord":
        """Create an AlarmRecord from a DescribeAlarms MetricAlarm entry."""
        missing = [key for key in REQUIRED_ALARM_KEYS if data.get(key) is None]
        if missing:
            raise MalformedAlarmError(
                f"Alarm '{data.get('AlarmName', '<unnamed>')}' is missing "
                f"required fields: {', '.join(missing)}"
            )

        try:
            dimensions = {d["Name"]: d["Value"] for d in data.get("Dimensions", [])}
        except (KeyError, TypeError) as e:
            raise MalformedAlarmError(
                f"Alarm '{data['AlarmName']}' has an invalid dimension: {e}"
            ) from e

        return cls(
            name=data["AlarmName"],
            arn=data["AlarmArn"],
            metric_name=data["MetricName"],
            namespace=data["Namespace"],
            state_value=data["StateValue"],
            state_updated_timestamp=data["StateUpdatedTimestamp"],
            dimensions=dimensions,
        )


def alarm_filter(state_value: str = "") -> AlarmQuery:
    return AlarmQuery(state_value=state_value or DEFAULT_STATE_VALUE)


class AlarmFetcher:
    """Fetches every alarm page matching a query from CloudWatch."""

    def __init__(self, client) -> None:
        self.client = client

    def fetch(self, query: AlarmQuery) -> List[Dict[str, Any]]:
        """Return the raw MetricAlarms of all pages.

        Any failing page aborts the whole fetch with FetchError.
        """
        alarms: List[Dict[str, Any]] = []
        try:
            paginator = self.client.get_paginator("describe_alarms")
            for page_number, page in enumerate(
                paginator.paginate(**query.to_params()), start=1
            ):
                page_alarms = page.get("MetricAlarms", [])
                logger.debug(f"Page {page_number}: got {len(page_alarms)} alarms")
                alarms.extend(page_alarms)
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Failed to get alarm data: {e}")
            raise FetchError(f"failed to get alarm data: {e}") from e

        logger.info(
            f"Fetched {len(alarms)} alarms in state '{query.state_value}'"
        )
        return alarms
