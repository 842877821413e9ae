"""
Pytest configuration and shared fixtures.

CloudWatch is a real boto3 client wrapped in botocore's Stubber, so no
request ever leaves the process.
"""

import pytest
import boto3
from datetime import datetime, timezone
from typing import Any, Dict, List

from botocore.stub import Stubber

from awsalarms import CloudWatchAlarms, CloudWatchAlarmsConfig, MetricAccumulator

REGION = "us-east-1"
STATE_UPDATED = datetime(2024, 1, 15, 10, 30, 0, tzinfo=timezone.utc)


# ============================================================================
# AWS client fixtures
# ============================================================================

@pytest.fixture
def aws_env(monkeypatch, tmp_path):
    """Isolate boto3 from the developer's AWS environment."""
    for var in (
        "AWS_ACCESS_KEY_ID",
        "AWS_SECRET_ACCESS_KEY",
        "AWS_SESSION_TOKEN",
        "AWS_PROFILE",
        "AWS_DEFAULT_PROFILE",
        "AWS_SHARED_CREDENTIALS_FILE",
        "AWS_ROLE_ARN",
        "AWS_WEB_IDENTITY_TOKEN_FILE",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "no-config"))
    monkeypatch.setenv("AWS_EC2_METADATA_DISABLED", "true")


@pytest.fixture
def cloudwatch_client(aws_env):
    return boto3.client(
        "cloudwatch",
        region_name=REGION,
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


@pytest.fixture
def stubber(cloudwatch_client):
    with Stubber(cloudwatch_client) as stub:
        yield stub
        stub.assert_no_pending_responses()


# ============================================================================
# Alarm data fixtures
# ============================================================================

def make_alarm(
    name: str = "alarm",
    state: str = "ALARM",
    dimensions: List[Dict[str, str]] = None,
    **overrides: Any,
) -> Dict[str, Any]:
    """Build a DescribeAlarms MetricAlarm entry."""
    alarm = {
        "AlarmName": name,
        "AlarmDescription": name,
        "AlarmArn": f"arn:aws:cloudwatch:{REGION}:123456789012:alarm:{name}",
        "Namespace": "AWS/RDS",
        "MetricName": "memory",
        "StateValue": state,
        "StateUpdatedTimestamp": STATE_UPDATED,
        "Dimensions": dimensions
        if dimensions is not None
        else [{"Name": "vm-instance", "Value": "vm1"}],
    }
    alarm.update(overrides)
    return alarm


@pytest.fixture
def sample_alarm() -> Dict[str, Any]:
    """The single alarm from the RDS memory scenario."""
    return make_alarm(AlarmArn="arn:TEST")


@pytest.fixture
def sample_alarms() -> List[Dict[str, Any]]:
    return [
        make_alarm("cpu-high", dimensions=[{"Name": "InstanceId", "Value": "i-1"}]),
        make_alarm("disk-low", dimensions=[{"Name": "InstanceId", "Value": "i-2"}]),
        make_alarm("mem-high", dimensions=[]),
    ]


# ============================================================================
# Plugin fixtures
# ============================================================================

@pytest.fixture
def config() -> CloudWatchAlarmsConfig:
    return CloudWatchAlarmsConfig(region=REGION, access_key="asas", secret_key="asas")


@pytest.fixture
def plugin(config, cloudwatch_client) -> CloudWatchAlarms:
    return CloudWatchAlarms(config, client=cloudwatch_client)


@pytest.fixture
def acc() -> MetricAccumulator:
    return MetricAccumulator()


@pytest.fixture
def alarm_factory():
    """Factory for MetricAlarm entries."""
    return make_alarm
