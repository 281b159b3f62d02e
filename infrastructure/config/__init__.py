"""
Configuration management: models and loading.

Handles:
- StudioConfig: save formatting, "New" defaults, logging levels
- YAML loading with defaults when no file is present

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import load_studio_config, load_studio_config_or_default
from infrastructure.config.models import (
    LoggingConfig,
    NewTaxonomyConfig,
    SaveConfig,
    StudioConfig,
)

__all__ = [
    # Main config (most commonly used)
    "StudioConfig",
    "load_studio_config",
    "load_studio_config_or_default",
    # Sections
    "SaveConfig",
    "NewTaxonomyConfig",
    "LoggingConfig",
]
