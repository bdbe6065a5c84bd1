"""Shared domain exceptions and error codes.

Every exception raised by the identity core inherits from DomainException so
the presentation layer can translate it into a response from its code alone.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for API clients.

    These codes are part of the public API contract. Should not be changed.
    """

    # Validation Errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_ACTIVITY_ID = "INVALID_ACTIVITY_ID"
    EMPTY_DISPLAY_NAME = "EMPTY_DISPLAY_NAME"
    INVALID_EMAIL = "INVALID_EMAIL"
    WEAK_PASSWORD = "WEAK_PASSWORD"
    INVALID_CREDENTIAL_FORMAT = "INVALID_CREDENTIAL_FORMAT"

    # Authentication Errors (401)
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    INVALID_TOKEN = "INVALID_TOKEN"

    # Conflict Errors (409)
    CONFLICT = "CONFLICT"
    REGISTRATION_CONFLICT = "REGISTRATION_CONFLICT"

    # Infrastructure Errors (500)
    REPOSITORY_ERROR = "REPOSITORY_ERROR"
    HASH_FORMAT_ERROR = "HASH_FORMAT_ERROR"
    TOKEN_ISSUANCE_FAILED = "TOKEN_ISSUANCE_FAILED"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all domain-related errors.

    Attributes
    ----------
    message
        Human-readable error message
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged but not exposed to users)
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ValidationError(DomainException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class ConflictError(DomainException):
    """Raised when an operation conflicts with existing state."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFLICT,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class RepositoryError(DomainException):
    """Raised when the backing store fails or holds inconsistent data.

    The message is meant for logs; clients only ever see a generic error.
    """

    def __init__(
        self,
        message: str = "Storage operation failed",
        code: ErrorCode = ErrorCode.REPOSITORY_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)
