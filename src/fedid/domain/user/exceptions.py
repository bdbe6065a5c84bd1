"""User domain exceptions.

Raised while building identity value objects and while registering users.
"""

from typing import Any

from fedid.domain.shared.exceptions import (
    ConflictError,
    ErrorCode,
    ValidationError,
)


class InvalidActivityIdError(ValidationError):
    """Raised when an activity id is not an https:// URI."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f"Activity id must start with https://: {value!r}",
            code=ErrorCode.INVALID_ACTIVITY_ID,
        )


class EmptyDisplayNameError(ValidationError):
    """Raised when a display name is empty."""

    def __init__(self) -> None:
        super().__init__(
            "Display name cannot be empty",
            code=ErrorCode.EMPTY_DISPLAY_NAME,
        )


class InvalidEmailError(ValidationError):
    """
    Raised when email format is invalid.

    Attributes
    ----------
    message
        Error description
    """

    def __init__(self, message: str) -> None:
        super().__init__(message, code=ErrorCode.INVALID_EMAIL)


class RegistrationConflictError(ConflictError):
    """Activity id or email already registered.

    The conflicting field is kept in ``details`` for logging only.
    """

    def __init__(
        self,
        message: str = "User id or email address is already registered",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            code=ErrorCode.REGISTRATION_CONFLICT,
            details=details,
        )
