"""
Exception hierarchy for the tutoring backend.

Handlers map ValidationError to 400, SessionNotFoundError to 404 and
MethodNotAllowedError to 405; anything else is a 500. Each exception
carries a ``details`` dict that is logged, never returned to clients.

Dependencies: None
System role: Error vocabulary shared by handlers, services and boundaries
"""

from typing import Any


class TutorBackendException(Exception):
    """Base exception for all tutoring backend errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(TutorBackendException):
    """Raised when request validation fails (missing field, bad body)."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: User-facing error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        self.field = field
        super().__init__(message, details)


class MethodNotAllowedError(TutorBackendException):
    """Raised when a route receives an unsupported HTTP method."""

    def __init__(self, method: str | None) -> None:
        self.method = method
        super().__init__("Method Not Allowed.", {"method": method})


class SessionNotFoundError(TutorBackendException):
    """Raised when a session cannot be found."""

    def __init__(self, session_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize session not found error.

        Args:
            session_id: ID of the missing session
            details: Additional context
        """
        details = details or {}
        details["session_id"] = session_id
        self.session_id = session_id
        super().__init__("Session not found.", details)


class ConfigurationError(TutorBackendException):
    """Raised when required configuration (table, bucket, secret) is missing."""

    pass


class UpstreamCallError(TutorBackendException):
    """Raised when a provider, search, secret or database call fails."""

    def __init__(
        self,
        message: str,
        provider: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize upstream call error.

        Args:
            message: Error message
            provider: Upstream service name (openai, gemini, dynamodb, ...)
            details: Additional context
        """
        details = details or {}
        if provider:
            details["provider"] = provider
        self.provider = provider
        super().__init__(message, details)


class UpstreamParseError(UpstreamCallError):
    """Raised when an auxiliary model's output is not the expected JSON shape."""

    pass
