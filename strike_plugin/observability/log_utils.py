"""
Logging utilities for safe structured logging.

Provides helpers for logging exceptions together with their nested
cause without string concatenation errors.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any


def safe_log_value(value: Any, max_length: int = 500) -> str:
    """
    Safely convert any value to a string for logging.

    Handles lists, dicts, None, and other types safely.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Safe string representation
    """
    try:
        if value is None:
            return "None"
        if isinstance(value, str):
            val_str = value
        elif isinstance(value, (list, tuple)):
            val_str = f"{type(value).__name__}({len(value)} items)"
        elif isinstance(value, dict):
            val_str = f"dict({len(value)} keys)"
        else:
            val_str = str(value)

        if len(val_str) > max_length:
            return val_str[:max_length] + f"... (truncated, {len(val_str)} total)"
        return val_str
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"


def inner_error_message(exc: BaseException) -> str | None:
    """
    Get the message of the error nested inside an exception.

    SQLAlchemy DBAPI errors keep the driver error on ``orig``; everything
    else is read from the explicit or implicit exception chain.

    Args:
        exc: Exception to inspect

    Returns:
        str | None: Nested error message, None when there is no nested error
    """
    inner = getattr(exc, "orig", None) or exc.__cause__ or exc.__context__
    if inner is None or inner is exc:
        return None
    return str(inner)


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context,
) -> None:
    """
    Log an exception with full context.

    The error message and the nested error message are appended to the
    log message and also attached as ``error_msg`` / ``inner_error_msg``
    record attributes.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Additional context dict
    """
    inner = inner_error_message(exc)
    safe_context = {
        key: safe_log_value(val) for key, val in context.items()
    }
    safe_context.update({
        "error_type": type(exc).__name__,
        "error_msg": safe_log_value(str(exc)),
        "inner_error_msg": safe_log_value(inner),
    })
    logger.error(
        "%s, error: %s / %s",
        message,
        safe_context["error_msg"],
        safe_context["inner_error_msg"],
        exc_info=exc,
        extra=safe_context,
    )
