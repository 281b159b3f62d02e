"""Startup wiring for front ends: load configuration, then configure logging."""

import logging
from pathlib import Path

from infrastructure.config import StudioConfig, load_studio_config_or_default
from infrastructure.constants import STUDIO_CONFIG_FILE
from infrastructure.observability import configure_logging_from_config

logger = logging.getLogger(__name__)


def init_studio(config_path: Path = STUDIO_CONFIG_FILE) -> StudioConfig:
    """
    Load studio.yaml (defaults when absent) and apply its logging section.

    Returns the configuration so the caller can pass its sections to
    save_data / new_taxonomy.
    """
    cfg = load_studio_config_or_default(Path(config_path))
    configure_logging_from_config(cfg.logging)
    logger.info("Studio initialised (config=%s)", config_path)
    return cfg
