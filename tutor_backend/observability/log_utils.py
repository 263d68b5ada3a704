"""
Structured logging helpers.

Context passed through ``extra`` is flattened to short strings, so a full
session history or an API Gateway event never floods a log line, and
secrets are masked before they reach a log.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

from tutor_backend.core.exceptions import TutorBackendException

MAX_VALUE_LENGTH = 500


def safe_log_value(value: Any, max_length: int = MAX_VALUE_LENGTH) -> str:
    """
    Short string form of ``value`` for a log field.

    Lists, tuples and dicts are summarized by size instead of rendered.
    """
    if value is None:
        return "None"
    if isinstance(value, (list, tuple)):
        text = f"{type(value).__name__}({len(value)} items)"
    elif isinstance(value, dict):
        text = f"dict({len(value)} keys)"
    else:
        try:
            text = str(value)
        except Exception as e:  # pylint: disable=broad-except
            return f"<unable to log: {type(e).__name__}>"

    if len(text) > max_length:
        return f"{text[:max_length]}... (truncated, {len(text)} total)"
    return text


def mask_secret(value: str | None, visible: int = 5) -> str:
    """Return only the first characters of a secret, for log lines."""
    if not value:
        return "<empty>"
    return value[:visible] + "..."


def _safe_context(context: dict[str, Any]) -> dict[str, str]:
    return {key: safe_log_value(value) for key, value in context.items()}


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context,
) -> None:
    """Log ``message`` with each keyword attached as a record attribute."""
    logger.log(level, message, extra=_safe_context(context))


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context,
) -> None:
    """
    Log an exception with its traceback and context.

    Domain exceptions also contribute their ``details`` as
    ``detail_<key>`` attributes (``detail_provider``, ``detail_field``...).

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception being reported
        **context: Additional record attributes
    """
    extra = _safe_context(context)
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = str(exc)
    if isinstance(exc, TutorBackendException):
        for key, value in exc.details.items():
            extra[f"detail_{key}"] = safe_log_value(value)
    logger.error(message, exc_info=exc, extra=extra)
