"""Filesystem utility functions."""

import json
import logging
from pathlib import Path
from typing import Any

from domain.errors import JsonParseError, TaxonomyIOError

logger = logging.getLogger(__name__)


def read_text(path: Path) -> str:
    """
    Read a whole text file with UTF-8 encoding.

    Raises:
        TaxonomyIOError: If the file is missing or unreadable
    """
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise TaxonomyIOError(path, "File not found") from e
    except PermissionError as e:
        raise TaxonomyIOError(path, "Permission denied") from e
    except (OSError, UnicodeDecodeError) as e:
        raise TaxonomyIOError(path, f"Cannot read file ({e})") from e


def read_json(path: Path) -> Any:
    """
    Read and parse a whole JSON file.

    Raises:
        TaxonomyIOError: If the file cannot be read
        JsonParseError: If the contents are not valid JSON
    """
    text = read_text(path)
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise JsonParseError(path, e.msg, line=e.lineno, column=e.colno) from e
    logger.debug("Read JSON document: %s", path)
    return payload


def write_json(path: Path, payload: Any, *, indent: int = 2, ensure_ascii: bool = False) -> None:
    """
    Overwrite `path` with pretty-printed JSON.

    The write is not atomic: a crash mid-write can leave a truncated file.

    Raises:
        TaxonomyIOError: If the file cannot be written
    """
    text = json.dumps(payload, indent=indent, ensure_ascii=ensure_ascii)
    try:
        with path.open("w", encoding="utf-8") as f:
            f.write(text)
    except PermissionError as e:
        raise TaxonomyIOError(path, "Permission denied") from e
    except OSError as e:
        raise TaxonomyIOError(path, f"Cannot write file ({e.strerror or e})") from e
    logger.debug("Wrote JSON document: %s", path)
