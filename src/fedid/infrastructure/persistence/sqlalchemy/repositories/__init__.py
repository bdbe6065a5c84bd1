from fedid.infrastructure.persistence.sqlalchemy.repositories.credential_repository import (  # noqa: E501
    CredentialRepositorySQLAlchemy,
)
from fedid.infrastructure.persistence.sqlalchemy.repositories.registration_repository import (  # noqa: E501
    UserRegistrationRepositorySQLAlchemy,
)
from fedid.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "CredentialRepositorySQLAlchemy",
    "UserRegistrationRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
