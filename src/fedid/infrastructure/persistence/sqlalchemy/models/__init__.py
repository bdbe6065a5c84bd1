from fedid.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from fedid.infrastructure.persistence.sqlalchemy.models.credential_model import (
    CredentialModel,
)
from fedid.infrastructure.persistence.sqlalchemy.models.user_model import UserModel

__all__ = [
    "Base",
    "CredentialModel",
    "TimestampMixin",
    "UserModel",
]
