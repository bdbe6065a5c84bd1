"""Authentication exceptions.

Raised by the login flow and the token services and handled centrally by the
API layer.
"""

from fedid.domain.shared.exceptions import DomainException, ErrorCode


class AuthError(DomainException):
    """Base exception for all authentication errors."""

    def __init__(
        self,
        message: str = "Authentication error",
        code: ErrorCode = ErrorCode.AUTHENTICATION_FAILED,
    ):
        super().__init__(message, code)


class AuthenticationFailedError(AuthError):
    """Raised when login fails.

    Unknown user ids and wrong passwords raise the same error with the same
    message so callers cannot tell them apart.
    """

    def __init__(self, message: str = "Invalid user id or password"):
        super().__init__(message, ErrorCode.AUTHENTICATION_FAILED)


class InvalidTokenError(AuthError):
    """Raised when a JWT token is invalid, expired, or malformed."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message, ErrorCode.INVALID_TOKEN)


class TokenIssuanceError(AuthError):
    """Raised when a token cannot be signed."""

    def __init__(self, message: str = "Token could not be issued"):
        super().__init__(message, ErrorCode.TOKEN_ISSUANCE_FAILED)
