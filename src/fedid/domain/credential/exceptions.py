"""Credential domain exceptions."""

from fedid.domain.shared.exceptions import DomainException, ErrorCode, ValidationError


class WeakPasswordError(ValidationError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message, code=ErrorCode.WEAK_PASSWORD)


class InvalidCredentialFormatError(ValidationError):
    """Raised when a stored hash string is not a well-formed Argon2 PHC string."""

    def __init__(self, message: str = "Password hash is not a valid Argon2 hash"):
        super().__init__(message, code=ErrorCode.INVALID_CREDENTIAL_FORMAT)


class HashFormatError(DomainException):
    """Raised when the hashing primitive cannot parse a stored hash."""

    def __init__(self, message: str = "Stored password hash cannot be parsed"):
        super().__init__(message, code=ErrorCode.HASH_FORMAT_ERROR)
