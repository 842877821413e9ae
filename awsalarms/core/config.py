import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from ..utils import load_yaml
from .constants import DEFAULT_RATE_LIMIT, PLUGIN_NAME, VALID_STATES
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

SAMPLE_CONFIG = """\
## Amazon Region
region: us-east-1

## Amazon Credentials
## Credentials are loaded in the following order
## 1) Assumed credentials via STS if role_arn is specified
## 2) explicit credentials from 'access_key' and 'secret_key'
## 3) shared profile from 'profile'
## 4) shared credentials file from 'shared_credential_file'
## 5) environment variables and EC2 Instance Profile
# access_key: ""
# secret_key: ""
# token: ""
# role_arn: ""
# profile: ""
# shared_credential_file: ""

## Endpoint to make request against, the correct endpoint is automatically
## determined and this option should only be set if you wish to override the
## default.
##   ex: endpoint_url: "http://localhost:8000"
# endpoint_url: ""

## Dimension tags to keep (glob patterns). Fixed tags are always kept.
# tags_include: []
# tags_exclude: []

## Optional alarm state to collect: OK, ALARM or INSUFFICIENT_DATA.
## Default is "ALARM"
# state_value: "ALARM"
"""


@dataclass
class CloudWatchAlarmsConfig:
    """Options of the awsalarms input."""

    region: str
    access_key: str = ""
    secret_key: str = ""
    token: str = ""
    role_arn: str = ""
    profile: str = ""
    shared_credential_file: str = ""
    endpoint_url: str = ""
    tags_include: List[str] = field(default_factory=list)
    tags_exclude: List[str] = field(default_factory=list)
    ratelimit: int = DEFAULT_RATE_LIMIT
    state_value: str = ""

    def __post_init__(self) -> None:
        if not self.region:
            raise ConfigurationError("'region' is required")
        for name in ("tags_include", "tags_exclude"):
            value = getattr(self, name)
            if value is None:
                setattr(self, name, [])
            elif not isinstance(value, list):
                raise ConfigurationError(f"'{name}' must be a list, got {value!r}")
        if self.state_value and self.state_value not in VALID_STATES:
            raise ConfigurationError(
                f"Unknown state_value '{self.state_value}'. "
                f"Must be one of {', '.join(sorted(VALID_STATES))}."
            )
        try:
            self.ratelimit = int(self.ratelimit)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"'ratelimit' must be an integer: {e}") from e

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CloudWatchAlarmsConfig":
        """Create a config from a mapping, optionally nested under the plugin name."""
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config must be a mapping, got {type(data).__name__}")
        if PLUGIN_NAME in data and isinstance(data[PLUGIN_NAME], dict):
            data = data[PLUGIN_NAME]

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown config keys: {', '.join(unknown)}")
        if "region" not in data:
            raise ConfigurationError("'region' is required")
        return cls(**data)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "CloudWatchAlarmsConfig":
        """Load config from a YAML file."""
        try:
            data = load_yaml(path)
        except (FileNotFoundError, yaml.YAMLError) as e:
            logger.error(f"Error loading config from {path}: {e}")
            raise ConfigurationError(f"Failed to load config from {path}: {e}") from e
        config = cls.from_dict(data or {})
        logger.info(f"Loaded config for region '{config.region}' from {path}")
        return config
