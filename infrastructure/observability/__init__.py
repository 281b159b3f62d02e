"""
Observability: logging and context management.

Provides:
- Contextual logging with the active document name
- Log rotation and file management
"""

from infrastructure.observability.logging import (
    clear_log_context,
    configure_logging,
    configure_logging_from_config,
    get_log_context,
    set_log_context,
)

__all__ = [
    "configure_logging",
    "configure_logging_from_config",
    "set_log_context",
    "get_log_context",
    "clear_log_context",
]
