"""I/O utilities: whole-file text and JSON read/write."""

from infrastructure.io.fs import read_json, read_text, write_json

__all__ = [
    "read_text",
    "read_json",
    "write_json",
]
