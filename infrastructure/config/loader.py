"""Configuration loading from YAML files."""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from infrastructure.config.models import StudioConfig
from infrastructure.constants import STUDIO_CONFIG_FILE

logger = logging.getLogger(__name__)


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    # An empty file means "all defaults"
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def load_studio_config(path: Path = STUDIO_CONFIG_FILE) -> StudioConfig:
    """
    Load studio.yaml into a StudioConfig.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the YAML is not a mapping or fails validation
    """
    data = _load_yaml(path)
    try:
        cfg = StudioConfig(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration in {path}: {e}") from e
    logger.debug("Loaded studio config from %s", path)
    return cfg


def load_studio_config_or_default(path: Path = STUDIO_CONFIG_FILE) -> StudioConfig:
    """Like load_studio_config, but a missing file yields the defaults."""
    if not path.exists():
        logger.debug("No studio config at %s; using defaults", path)
        return StudioConfig()
    return load_studio_config(path)
