"""
HTTP response helpers for API Gateway proxy handlers.

Every response, including preflight and error responses, carries the
CORS headers for the route's verb set.
"""

import functools
import json
import logging
from typing import Any, Callable, Iterable

from tutor_backend.core.exceptions import (
    MethodNotAllowedError,
    SessionNotFoundError,
    TutorBackendException,
    ValidationError,
)
from tutor_backend.core.lambda_utils.event_parser import get_method
from tutor_backend.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

CORS_ALLOW_HEADERS = "Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token"

HandlerResult = tuple[int, Any]


def cors_headers(methods: Iterable[str]) -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Methods": ", ".join(methods),
        "Access-Control-Allow-Headers": CORS_ALLOW_HEADERS,
    }


def build_response(status_code: int, body: Any, methods: Iterable[str]) -> dict[str, Any]:
    """Proxy integration response; a ``None`` body becomes an empty body."""
    return {
        "statusCode": status_code,
        "headers": cors_headers(methods),
        "body": "" if body is None else json.dumps(body, default=str),
    }


def error_response(
    exc: Exception,
    methods: Iterable[str],
    failure_message: str,
) -> dict[str, Any]:
    """
    Map an exception onto a status code and user-facing body.

    Unexpected exceptions become 500 without internals in the body.
    """
    if isinstance(exc, MethodNotAllowedError):
        return build_response(405, {"message": exc.message}, methods)
    if isinstance(exc, ValidationError):
        return build_response(400, {"message": exc.message}, methods)
    if isinstance(exc, SessionNotFoundError):
        return build_response(404, {"message": exc.message}, methods)

    error_text = exc.message if isinstance(exc, TutorBackendException) else "Internal server error"
    return build_response(500, {"message": failure_message, "error": error_text}, methods)


def http_handler(allowed_method: str, failure_message: str) -> Callable:
    """
    Decorator for API Gateway proxy handlers.

    Centralizes:
    - OPTIONS preflight (200, empty body, handler body never runs)
    - 405 for any other method than ``allowed_method``
    - mapping domain exceptions to 4xx and everything else to 500
    - CORS headers on every path

    The wrapped function returns ``(status_code, body)``.
    """
    methods = (allowed_method, "OPTIONS")

    def decorator(func: Callable[[dict[str, Any], Any], HandlerResult]) -> Callable:
        @functools.wraps(func)
        def wrapper(event: dict[str, Any], context: Any) -> dict[str, Any]:
            method = get_method(event)
            if method == "OPTIONS":
                return build_response(200, None, methods)

            try:
                if method != allowed_method:
                    raise MethodNotAllowedError(method)
                status_code, body = func(event, context)
                return build_response(status_code, body, methods)

            except (MethodNotAllowedError, ValidationError, SessionNotFoundError) as e:
                logger.warning(
                    "%s - Request rejected: %s",
                    func.__name__,
                    e.message,
                    extra={"error_details": e.details},
                )
                return error_response(e, methods, failure_message)

            except Exception as e:  # pylint: disable=broad-except
                log_exception_with_context(
                    logger,
                    f"{func.__name__} - {failure_message}",
                    e,
                    method=method,
                )
                return error_response(e, methods, failure_message)

        return wrapper

    return decorator
