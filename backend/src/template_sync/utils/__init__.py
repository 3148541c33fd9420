"""Utility modules for the template sync tool."""

from template_sync.utils.actions import escape_data, set_failed
from template_sync.utils.logging import (
    clear_run_context,
    configure_logging,
    get_logger,
    set_run_context,
)

__all__ = [
    "clear_run_context",
    "configure_logging",
    "escape_data",
    "get_logger",
    "set_failed",
    "set_run_context",
]
