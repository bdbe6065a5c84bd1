"""In-memory persistence for users and credentials."""

from fedid.infrastructure.persistence.memory.repositories import (
    InMemoryCredentialRepository,
    InMemoryUserRegistrationRepository,
    InMemoryUserRepository,
)
from fedid.infrastructure.persistence.memory.store import InMemoryIdentityStore

__all__ = [
    "InMemoryCredentialRepository",
    "InMemoryIdentityStore",
    "InMemoryUserRegistrationRepository",
    "InMemoryUserRepository",
]
