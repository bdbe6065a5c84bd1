from fedid.domain.credential.repositories.credential_repository import (
    CredentialRepository,
)
from fedid.domain.credential.repositories.registration_repository import (
    UserRegistrationRepository,
)

__all__ = [
    "CredentialRepository",
    "UserRegistrationRepository",
]
