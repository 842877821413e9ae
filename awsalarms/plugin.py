import logging

from botocore.exceptions import BotoCoreError

from .accumulator import Accumulator
from .cloudwatch import AlarmAggregator, AlarmFetcher, alarm_filter
from .core.config import SAMPLE_CONFIG, CloudWatchAlarmsConfig
from .core.exceptions import FetchError, SessionError
from .core.filter import IncludeExcludeFilter
from .core.session import create_cloudwatch_client

logger = logging.getLogger(__name__)


class CloudWatchAlarms:
    """Input that pulls alarm states from Amazon CloudWatch."""

    def __init__(self, config: CloudWatchAlarmsConfig, client=None) -> None:
        self.config = config
        # Config level filter, fixed for the life of the plugin
        self.tag_filter = IncludeExcludeFilter(config.tags_include, config.tags_exclude)
        self.aggregator = AlarmAggregator(config.region, self.tag_filter)
        self._client = client

    @staticmethod
    def description() -> str:
        return "Pull Alarm States from Amazon CloudWatch"

    @staticmethod
    def sample_config() -> str:
        return SAMPLE_CONFIG

    @property
    def client(self):
        if self._client is None:
            try:
                self._client = create_cloudwatch_client(self.config)
            except (SessionError, BotoCoreError) as e:
                raise FetchError(f"failed to create CloudWatch client: {e}") from e
        return self._client

    def gather(self, acc: Accumulator) -> None:
        """Fetch alarms and add one metric per alarm to the accumulator.

        Fetch failures are reported through ``acc.add_error`` and the cycle
        ends with no metrics.
        """
        query = alarm_filter(self.config.state_value)
        try:
            alarms = AlarmFetcher(self.client).fetch(query)
        except FetchError as e:
            acc.add_error(e)
            return

        emitted = self.aggregator.emit(acc, alarms)
        logger.info(f"Gathered {emitted} alarm metrics in {self.config.region}")
