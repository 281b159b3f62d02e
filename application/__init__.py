"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure. It is the
surface an editor or browser front end calls into; every function takes
its inputs explicitly and keeps no state between calls.
"""

from application.bootstrap import init_studio
from application.browsing import BrowseResult, browse
from application.errors import ErrorSummary, FileAction, describe_error
from application.persistence import (
    load_data,
    load_data_with_schema,
    load_schema,
    new_taxonomy,
    resolve_schema_path,
    save_data,
    save_schema,
)
from application.validation import check_conformance, collect_errors, validate

__all__ = [
    # Startup
    "init_studio",
    # Persistence
    "load_data",
    "load_data_with_schema",
    "load_schema",
    "save_data",
    "save_schema",
    "new_taxonomy",
    "resolve_schema_path",
    # Validation
    "validate",
    "collect_errors",
    "check_conformance",
    # Browsing
    "browse",
    "BrowseResult",
    # Error summaries
    "describe_error",
    "ErrorSummary",
    "FileAction",
]
