"""Configuration models (Pydantic classes)."""

import logging
from pathlib import Path

from pydantic import BaseModel, Field, model_validator


class SaveConfig(BaseModel):
    """JSON output formatting for saved data files."""

    indent: int = Field(default=2, ge=0)
    ensure_ascii: bool = False


class NewTaxonomyConfig(BaseModel):
    """
    Defaults for the "New" action.

    Defaults match the original editor behavior.
    """

    schema_filename: str = "schema.json"
    schema_id: str = "default"
    title: str = "Default Schema"
    description: str | None = "Default taxonomy schema"
    root: str = "Root"
    facets: dict[str, list[str]] = Field(default_factory=lambda: {"category": ["uncategorized"]})


class LoggingConfig(BaseModel):
    """Console/file log levels and optional rotating log file."""

    console_level: str = "INFO"
    file_level: str = "DEBUG"
    log_file: Path | None = None

    @model_validator(mode="after")
    def _validate(self) -> "LoggingConfig":
        for attr in ("console_level", "file_level"):
            level = str(getattr(self, attr)).strip().upper()
            if not isinstance(logging.getLevelName(level), int):
                raise ValueError(f"logging.{attr} must be a standard level name, got {level!r}")
            setattr(self, attr, level)
        return self

    @property
    def console_level_no(self) -> int:
        return logging.getLevelName(self.console_level)

    @property
    def file_level_no(self) -> int:
        return logging.getLevelName(self.file_level)


class StudioConfig(BaseModel):
    """
    Runtime configuration.
    - Loaded from configs/studio.yaml when present
    - Every section falls back to its defaults
    """

    save: SaveConfig = Field(default_factory=SaveConfig)
    new_taxonomy: NewTaxonomyConfig = Field(default_factory=NewTaxonomyConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
