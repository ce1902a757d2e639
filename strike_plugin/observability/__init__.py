"""
Observability module.

Provides logging configuration and safe structured-logging helpers.
"""

from strike_plugin.observability.log_utils import (
    log_exception_with_context,
    safe_log_value,
)
from strike_plugin.observability.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "log_exception_with_context",
    "safe_log_value",
]
