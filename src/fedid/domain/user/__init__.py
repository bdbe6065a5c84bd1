"""User domain: the public identity of an account.

This domain handles:
- User aggregate (id, activity id, display name, icon)
- Identity value objects (ActivityId, DisplayName, Email, AccessToken)
- Token issuing capability

Secrets are handled by fedid.domain.credential.
"""

from fedid.domain.user.aggregates import User
from fedid.domain.user.exceptions import (
    EmptyDisplayNameError,
    InvalidActivityIdError,
    InvalidEmailError,
    RegistrationConflictError,
)
from fedid.domain.user.repositories import UserRepository
from fedid.domain.user.services import TokenIssuer
from fedid.domain.user.value_objects import (
    AccessToken,
    ActivityId,
    DisplayName,
    Email,
)

__all__ = [
    "AccessToken",
    "ActivityId",
    "DisplayName",
    "Email",
    "EmptyDisplayNameError",
    "InvalidActivityIdError",
    "InvalidEmailError",
    "RegistrationConflictError",
    "TokenIssuer",
    "User",
    "UserRepository",
]
