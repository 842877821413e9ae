"""
Plugin unit tests

A full poll cycle against a stubbed CloudWatch client.
"""

import pytest
import yaml

from awsalarms import CloudWatchAlarms, CloudWatchAlarmsConfig, MetricAccumulator
from awsalarms.core.exceptions import FetchError, FilterConstructionError, SessionError


class TestCloudWatchAlarmsGather:
    def test_gather(self, plugin, stubber, acc, sample_alarm):
        stubber.add_response(
            "describe_alarms", {"MetricAlarms": [sample_alarm]}, {"StateValue": "ALARM"}
        )

        plugin.gather(acc)

        assert acc.errors == []
        assert acc.has_measurement("alarm")
        metric = acc.metrics[0]
        assert metric.fields == {"State": "ALARM"}
        assert metric.tags == {
            "region": "us-east-1",
            "namespace": "AWS/RDS",
            "alarmArn": "arn:TEST",
            "metricName": "memory",
            "vm-instance": "vm1",
        }

    def test_gather_uses_configured_state(self, cloudwatch_client, stubber, acc, alarm_factory):
        config = CloudWatchAlarmsConfig(region="us-east-1", state_value="OK")
        plugin = CloudWatchAlarms(config, client=cloudwatch_client)
        stubber.add_response(
            "describe_alarms",
            {"MetricAlarms": [alarm_factory(state="OK")]},
            {"StateValue": "OK"},
        )

        plugin.gather(acc)

        assert acc.metrics[0].fields == {"State": "OK"}

    def test_gather_no_alarms(self, plugin, stubber, acc):
        stubber.add_response("describe_alarms", {"MetricAlarms": []}, {"StateValue": "ALARM"})

        plugin.gather(acc)

        assert acc.metrics == []
        assert acc.errors == []

    def test_gather_all_pages(self, plugin, stubber, acc, alarm_factory):
        for page in range(3):
            response = {
                "MetricAlarms": [
                    alarm_factory(f"alarm-{page}-{i}") for i in range(2)
                ]
            }
            if page < 2:
                response["NextToken"] = f"token-{page + 1}"
            expected = {"StateValue": "ALARM"}
            if page > 0:
                expected["NextToken"] = f"token-{page}"
            stubber.add_response("describe_alarms", response, expected)

        plugin.gather(acc)

        names = [m.name for m in acc.metrics]
        assert len(names) == 6
        assert len(set(names)) == 6

    def test_gather_error_reports_once_and_emits_nothing(
        self, plugin, stubber, acc, alarm_factory
    ):
        stubber.add_response(
            "describe_alarms",
            {"MetricAlarms": [alarm_factory("a1")], "NextToken": "token-1"},
            {"StateValue": "ALARM"},
        )
        stubber.add_client_error("describe_alarms", service_error_code="Throttling")

        plugin.gather(acc)

        assert acc.metrics == []
        assert len(acc.errors) == 1
        assert isinstance(acc.errors[0], FetchError)

    def test_next_cycle_after_error_is_independent(self, plugin, stubber, acc, sample_alarm):
        stubber.add_client_error("describe_alarms", service_error_code="InternalFailure")
        stubber.add_response(
            "describe_alarms", {"MetricAlarms": [sample_alarm]}, {"StateValue": "ALARM"}
        )

        plugin.gather(acc)
        plugin.gather(acc)

        assert len(acc.errors) == 1
        assert len(acc.metrics) == 1

    def test_client_creation_failure_is_reported(self, config, acc, monkeypatch):
        def fail(_config):
            raise SessionError("Failed to assume role")

        monkeypatch.setattr("awsalarms.plugin.create_cloudwatch_client", fail)
        plugin = CloudWatchAlarms(config)

        plugin.gather(acc)

        assert acc.metrics == []
        assert len(acc.errors) == 1
        assert isinstance(acc.errors[0], FetchError)


class TestCloudWatchAlarmsSetup:
    def test_invalid_tag_filter_fails_construction(self):
        config = CloudWatchAlarmsConfig(region="us-east-1", tags_include=["vm-["])
        with pytest.raises(FilterConstructionError):
            CloudWatchAlarms(config)

    def test_filter_built_once(self, plugin, stubber, acc, sample_alarm):
        tag_filter = plugin.tag_filter
        stubber.add_response(
            "describe_alarms", {"MetricAlarms": [sample_alarm]}, {"StateValue": "ALARM"}
        )
        plugin.gather(acc)
        assert plugin.tag_filter is tag_filter

    def test_description(self):
        assert CloudWatchAlarms.description() == "Pull Alarm States from Amazon CloudWatch"

    def test_sample_config_is_loadable(self):
        data = yaml.safe_load(CloudWatchAlarms.sample_config())
        config = CloudWatchAlarmsConfig.from_dict(data)
        assert config.region == "us-east-1"
        assert config.ratelimit == 25
