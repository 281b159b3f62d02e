"""
Logging setup with contextvars-based metadata injection.

- Adds the current document tag into every log line (via contextvars).
- Supports console-only logging OR console + rotating file logs.
"""

import contextvars
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from infrastructure.config.models import LoggingConfig

# Name of the data/schema file currently being loaded or saved
cv_document = contextvars.ContextVar("document", default="-")


class ContextInjectFilter(logging.Filter):
    """Inject context variables into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.doc = cv_document.get() or "-"
        return True


def set_log_context(*, document: str | Path | None = None) -> None:
    """Update logging context (thread-safe via contextvars)."""
    if document is not None:
        cv_document.set(Path(document).name)


def get_log_context() -> dict[str, str]:
    return {"document": str(cv_document.get() or "-")}


def clear_log_context() -> None:
    """Reset document context to default."""
    cv_document.set("-")


def configure_logging(
    *,
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    max_bytes: int = 5_000_000,  # 5MB
    backup_count: int = 3,
) -> None:
    """
    Configure application logging with contextvars support.

    Args:
        log_file: Path to log file (console only when None)
        console_level: Minimum level for console output (default: INFO)
        file_level: Minimum level for file output (default: DEBUG)
        max_bytes: Max log file size before rotation
        backup_count: Number of backup files to keep
    """
    # Clear existing handlers to avoid duplicate logs if called multiple times
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)  # keep root permissive; handlers enforce levels

    console_fmt = "%(asctime)s [%(levelname)s] doc=%(doc)s | %(message)s"
    file_fmt = "%(asctime)s [%(levelname)s] %(name)s | doc=%(doc)s | %(message)s"

    ctx_filter = ContextInjectFilter()

    ch = logging.StreamHandler()
    ch.setLevel(console_level)
    ch.setFormatter(logging.Formatter(console_fmt, datefmt="%H:%M:%S"))
    ch.addFilter(ctx_filter)
    root.addHandler(ch)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(file_fmt, datefmt="%Y-%m-%d %H:%M:%S"))
        fh.addFilter(ctx_filter)
        root.addHandler(fh)

    logging.getLogger(__name__).info(
        "Logging configured (console_level=%s, file=%s)",
        logging.getLevelName(console_level),
        str(log_file) if log_file is not None else "None",
    )


def configure_logging_from_config(cfg: LoggingConfig) -> None:
    """Apply a LoggingConfig section."""
    configure_logging(
        log_file=cfg.log_file,
        console_level=cfg.console_level_no,
        file_level=cfg.file_level_no,
    )
