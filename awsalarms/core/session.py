import boto3
import botocore.session
import logging
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from .config import CloudWatchAlarmsConfig
from .constants import (
    CONNECT_TIMEOUT,
    DEFAULT_ROLE_SESSION_NAME,
    MAX_POOL_CONNECTIONS,
    READ_TIMEOUT,
)
from .exceptions import SessionError

logger = logging.getLogger(__name__)

CLIENT_CONFIG = Config(
    connect_timeout=CONNECT_TIMEOUT,
    read_timeout=READ_TIMEOUT,
    max_pool_connections=MAX_POOL_CONNECTIONS,
)


def assume_role(
    base_session: boto3.Session,
    role_arn: str,
    region: str,
    role_session_name: str = DEFAULT_ROLE_SESSION_NAME,
) -> boto3.Session:
    """Assumes a specified role and returns a boto3 Session."""
    try:
        credentials = base_session.client("sts", region_name=region).assume_role(
            RoleArn=role_arn, RoleSessionName=role_session_name
        )["Credentials"]
    except (ClientError, BotoCoreError) as e:
        logger.error(f"Failed to assume role {role_arn}: {e}")
        raise SessionError(f"Failed to assume role {role_arn}: {e}") from e

    logger.info(f"Successfully assumed role: {role_arn}")
    return boto3.Session(
        aws_access_key_id=credentials["AccessKeyId"],
        aws_secret_access_key=credentials["SecretAccessKey"],
        aws_session_token=credentials["SessionToken"],
        region_name=region,
    )


def _base_session(config: CloudWatchAlarmsConfig) -> boto3.Session:
    if config.access_key and config.secret_key:
        return boto3.Session(
            aws_access_key_id=config.access_key,
            aws_secret_access_key=config.secret_key,
            aws_session_token=config.token or None,
            region_name=config.region,
        )

    core_session = botocore.session.Session(profile=config.profile or None)
    if config.shared_credential_file:
        core_session.set_config_variable(
            "credentials_file", config.shared_credential_file
        )
    try:
        return boto3.Session(botocore_session=core_session, region_name=config.region)
    except BotoCoreError as e:
        raise SessionError(f"Failed to create session: {e}") from e


def create_session(config: CloudWatchAlarmsConfig) -> boto3.Session:
    """Resolve credentials from the config into a boto3 Session.

    Order: assumed role, explicit keys, profile, shared credentials file,
    then the default boto3 chain (environment, instance profile).
    """
    session = _base_session(config)
    if config.role_arn:
        session = assume_role(session, config.role_arn, config.region)
    return session


def create_cloudwatch_client(config: CloudWatchAlarmsConfig):
    session = create_session(config)
    return session.client(
        "cloudwatch",
        region_name=config.region,
        endpoint_url=config.endpoint_url or None,
        config=CLIENT_CONFIG,
    )
