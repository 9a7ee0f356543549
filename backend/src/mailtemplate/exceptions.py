"""Custom exception classes for the email template library.

This module provides the error taxonomy raised by the builder and the
branding configuration loader. Each exception carries a status code and
structured error information so callers can surface it the same way as
any other application error.
"""

from __future__ import annotations

from typing import Any
from typing import Optional


class AppError(Exception):
    """Base exception for library errors.

    All library-specific exceptions inherit from this class.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP-style status code (default 500).
        detail: Optional additional context.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        detail: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.detail = detail

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a serializable error body."""
        result: dict[str, Any] = {"error": self.message}
        if self.detail:
            result["detail"] = self.detail
        return result


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str, field: Optional[str] = None):
        detail = f"Field: {field}" if field else None
        super().__init__(message, status_code=400, detail=detail)
        self.field = field


class InvalidArgumentError(ValidationError):
    """Raised when a builder argument has the wrong type.

    Use for precondition violations such as passing None where a
    string is required.
    """

    def __init__(self, field: str, expected: str = "str", actual: Any = None):
        super().__init__(
            f"Invalid argument '{field}': expected {expected}, "
            f"got {type(actual).__name__}",
            field=field,
        )
        self.expected = expected


class ConfigurationError(AppError):
    """Raised when branding configuration is missing or malformed."""

    def __init__(self, config_name: str, detail: Optional[str] = None):
        super().__init__(
            f"Invalid configuration: {config_name}",
            status_code=500,
            detail=detail,
        )
        self.config_name = config_name
