"""Credential domain: password hashes bound to users.

This domain handles:
- Credential entity and the HashedPassword value object
- Password hashing capability
- Credential storage and atomic registration interfaces
"""

from fedid.domain.credential.entities import Credential
from fedid.domain.credential.exceptions import (
    HashFormatError,
    InvalidCredentialFormatError,
    WeakPasswordError,
)
from fedid.domain.credential.repositories import (
    CredentialRepository,
    UserRegistrationRepository,
)
from fedid.domain.credential.services import PasswordHasher
from fedid.domain.credential.value_objects import HashedPassword

__all__ = [
    "Credential",
    "CredentialRepository",
    "HashFormatError",
    "HashedPassword",
    "InvalidCredentialFormatError",
    "PasswordHasher",
    "UserRegistrationRepository",
    "WeakPasswordError",
]
