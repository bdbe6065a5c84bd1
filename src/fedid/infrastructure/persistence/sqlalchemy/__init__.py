"""SQLAlchemy persistence for users and credentials."""

from fedid.infrastructure.persistence.sqlalchemy.models import (
    Base,
    CredentialModel,
    UserModel,
)
from fedid.infrastructure.persistence.sqlalchemy.repositories import (
    CredentialRepositorySQLAlchemy,
    UserRegistrationRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "CredentialModel",
    "CredentialRepositorySQLAlchemy",
    "UserModel",
    "UserRegistrationRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
