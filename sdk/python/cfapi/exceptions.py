"""cfapi exceptions."""

from __future__ import annotations

from typing import Any, Optional


class CloudflareError(Exception):
    """Base exception for all cfapi errors.

    ``operation`` names the client method that failed, e.g. ``get_spectrum_app``.
    """

    def __init__(self, message: str = "", operation: Optional[str] = None) -> None:
        self.operation = operation
        self.message = message
        super().__init__(f"{operation}: {message}" if operation else message)


class TransportError(CloudflareError):
    """The request could not be completed: connection failure, timeout or non-2xx status."""


class DecodeError(CloudflareError):
    """The response body is not the expected JSON envelope."""


class ApiError(TransportError):
    """API returned a non-2xx response."""

    def __init__(
        self,
        status_code: int,
        message: str = "",
        errors: Optional[list[Any]] = None,
        messages: Optional[list[Any]] = None,
        operation: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.errors = errors or []
        self.messages = messages or []
        super().__init__(f"[{status_code}] {message}", operation)
        self.message = message


class ValidationError(ApiError):
    """400 Bad Request."""

    def __init__(self, message: str = "Invalid request", **kwargs: Any) -> None:
        super().__init__(400, message, **kwargs)


class AuthenticationError(ApiError):
    """401 Unauthorized."""

    def __init__(self, message: str = "Authentication required", **kwargs: Any) -> None:
        super().__init__(401, message, **kwargs)


class ForbiddenError(ApiError):
    """403 Forbidden."""

    def __init__(self, message: str = "Insufficient permissions", **kwargs: Any) -> None:
        super().__init__(403, message, **kwargs)


class NotFoundError(ApiError):
    """404 Not Found."""

    def __init__(self, message: str = "Resource not found", **kwargs: Any) -> None:
        super().__init__(404, message, **kwargs)


class ConflictError(ApiError):
    """409 Conflict."""

    def __init__(self, message: str = "Resource already exists", **kwargs: Any) -> None:
        super().__init__(409, message, **kwargs)


class RateLimitError(ApiError):
    """429 Too Many Requests."""

    def __init__(self, message: str = "Rate limit exceeded", **kwargs: Any) -> None:
        super().__init__(429, message, **kwargs)
