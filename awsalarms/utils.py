from logging import Logger
from pathlib import Path
from typing import Dict, Union

import yaml


def load_yaml(file_path: Union[str, Path]) -> Dict:
    with open(file_path, "r") as file:
        data = yaml.safe_load(file)
    return data


def validate_config_path(path: Union[str, Path], logger: Logger) -> Path:
    """Validate that the configuration path exists."""
    path = Path(path)
    if not path.is_file():
        logger.error(f"Configuration file not found: {path}")
        raise FileNotFoundError(f"Configuration file not found: {path}")
    return path
