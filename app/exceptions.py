"""
Custom exception classes for the HookScore API.

Every exception maps to an HTTP status code and a machine-readable error
code, so that handlers can render them uniformly.

Exception Hierarchy:
    HookScoreException (base)
    ├── ValidationError (400)
    │   └── ContentTooLongError
    └── ExternalServiceError (502)
        └── LLMProviderError
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """Machine-readable error codes for API responses."""

    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Validation errors (400 / 422)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    CONTENT_TOO_LONG = "CONTENT_TOO_LONG"

    # External service errors (502)
    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"
    LLM_PROVIDER_ERROR = "LLM_PROVIDER_ERROR"


class HookScoreException(Exception):
    """
    Base exception class for all HookScore API errors.

    Attributes:
        message: Human-readable error message, safe for clients.
        error_code: Machine-readable error code.
        status_code: HTTP status code to return.
        details: Additional context (never sensitive).
        internal_message: Detailed message for logging only.
    """

    status_code: int = 500
    default_error_code: ErrorCode = ErrorCode.INTERNAL_ERROR
    default_message: str = "An unexpected error occurred"

    def __init__(
        self,
        message: Optional[str] = None,
        error_code: Optional[ErrorCode] = None,
        details: Optional[Dict[str, Any]] = None,
        internal_message: Optional[str] = None,
    ):
        self.message = message or self.default_message
        self.error_code = error_code or self.default_error_code
        self.details = details or {}
        self.internal_message = internal_message
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Error response body."""
        response = {
            "success": False,
            "error": self.message,
            "error_code": self.error_code.value,
        }
        if self.details:
            response["details"] = self.details
        return response

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code.value!r}, "
            f"status_code={self.status_code})"
        )


# =============================================================================
# Validation Errors (400 Bad Request)
# =============================================================================

class ValidationError(HookScoreException):
    """
    Raised when request data fails validation.

    Use this for missing or blank content, a missing content type, or any
    value the analyzers cannot accept.
    """

    status_code = 400
    default_error_code = ErrorCode.VALIDATION_ERROR
    default_message = "Invalid request data"

    def __init__(
        self,
        message: Optional[str] = None,
        field: Optional[str] = None,
        error_code: Optional[ErrorCode] = None,
        details: Optional[Dict[str, Any]] = None,
        internal_message: Optional[str] = None,
    ):
        details = details or {}
        if field:
            details["field"] = field

        super().__init__(
            message=message,
            error_code=error_code or self.default_error_code,
            details=details,
            internal_message=internal_message,
        )


class ContentTooLongError(ValidationError):
    """Raised when sanitized content exceeds the configured maximum length."""

    default_error_code = ErrorCode.CONTENT_TOO_LONG

    def __init__(
        self,
        length: int,
        max_length: int,
        field: str = "content",
    ):
        super().__init__(
            message=f"Content too long. Max {max_length:,} characters.",
            field=field,
            details={"length": length, "max_length": max_length},
        )


# =============================================================================
# External Service Errors (502 Bad Gateway)
# =============================================================================

class ExternalServiceError(HookScoreException):
    """Base class for third-party service failures."""

    status_code = 502
    default_error_code = ErrorCode.EXTERNAL_SERVICE_ERROR
    default_message = "External service error"

    def __init__(
        self,
        message: Optional[str] = None,
        service_name: Optional[str] = None,
        error_code: Optional[ErrorCode] = None,
        details: Optional[Dict[str, Any]] = None,
        internal_message: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        details = details or {}
        if service_name:
            details["service"] = service_name

        self.original_error = original_error

        super().__init__(
            message=message,
            error_code=error_code or self.default_error_code,
            details=details,
            internal_message=internal_message or (str(original_error) if original_error else None),
        )


class LLMProviderError(ExternalServiceError):
    """
    Remote scoring provider failure that escaped the heuristic fallback.
    """

    default_error_code = ErrorCode.LLM_PROVIDER_ERROR
    default_message = "Analysis service temporarily unavailable"

    def __init__(
        self,
        message: Optional[str] = None,
        provider_name: Optional[str] = None,
        error_code: Optional[ErrorCode] = None,
        details: Optional[Dict[str, Any]] = None,
        internal_message: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(
            message=message,
            service_name=provider_name or "llm_provider",
            error_code=error_code or self.default_error_code,
            details=details,
            internal_message=internal_message,
            original_error=original_error,
        )


def get_safe_error_message(exc: Exception) -> str:
    """Client-safe message for any exception."""
    if isinstance(exc, HookScoreException):
        return exc.message
    return "An unexpected error occurred. Please try again later."
