"""Map core exceptions to user-facing (title, message, details) summaries."""

import errno
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from domain.errors import DomainValidationError, SchemaConformanceError


class FileAction(str, Enum):
    """What the user was doing when the error happened."""

    LOAD = "load"
    SAVE = "save"
    REVERT = "revert"


@dataclass(frozen=True)
class ErrorSummary:
    title: str
    message: str
    details: str


def _cause(exc: BaseException) -> BaseException:
    return exc.__cause__ if exc.__cause__ is not None else exc


def _is_not_found(exc: BaseException) -> bool:
    return isinstance(_cause(exc), FileNotFoundError)


def _is_permission(exc: BaseException) -> bool:
    return isinstance(_cause(exc), PermissionError)


def _is_disk_full(exc: BaseException) -> bool:
    return getattr(_cause(exc), "errno", None) == errno.ENOSPC


def describe_error(exc: BaseException, path: Path | None, action: FileAction = FileAction.LOAD) -> ErrorSummary:
    """
    Summarize an exception for display.

    Args:
        exc: Exception raised by load_data / save_data
        path: File involved (None when no path has been chosen yet)
        action: Operation that failed
    """
    if action is FileAction.SAVE:
        return _describe_save_error(exc, path)

    if isinstance(exc, (DomainValidationError, SchemaConformanceError)):
        return ErrorSummary("Validation Error", "The taxonomy file has validation errors.", str(exc))

    if _is_not_found(exc):
        hint = (
            "The file may have been moved or deleted."
            if action is FileAction.REVERT
            else "Please verify the file exists and you have permission to read it."
        )
        return ErrorSummary("File Not Found", "The file could not be found.", f"Path: {path}\n\n{hint}")

    if _is_permission(exc):
        return ErrorSummary(
            "Permission Denied",
            "Permission denied.",
            f"You don't have permission to read this file:\n{path}",
        )

    if action is FileAction.REVERT:
        return ErrorSummary("Error Reverting File", "Failed to reload taxonomy file.", str(exc))
    return ErrorSummary("Error Loading File", "Failed to load taxonomy file.", str(exc))


def _describe_save_error(exc: BaseException, path: Path | None) -> ErrorSummary:
    if path is None:
        return ErrorSummary(
            "No File Path",
            "No file path is set for this taxonomy.",
            "Please use 'Save As...' to choose a location for this file.",
        )

    if _is_permission(exc):
        return ErrorSummary(
            "Permission Denied",
            "Permission denied.",
            f"You don't have permission to write to:\n{path}",
        )

    if _is_disk_full(exc):
        return ErrorSummary("Disk Full", "Disk full.", "There is no space left on the device to save the file.")

    return ErrorSummary("Error Saving File", "Failed to save taxonomy file.", str(exc))
