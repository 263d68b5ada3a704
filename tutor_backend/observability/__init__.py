"""
Observability module.

Logging configuration and structured logging helpers.
"""

from tutor_backend.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    mask_secret,
    safe_log_value,
)
from tutor_backend.observability.logger import configure_logging

__all__ = [
    "configure_logging",
    "log_exception_with_context",
    "log_with_context",
    "mask_secret",
    "safe_log_value",
]
