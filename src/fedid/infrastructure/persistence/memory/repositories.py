"""Repository adapters over InMemoryIdentityStore."""

from typing import Optional
from uuid import UUID

from fedid.domain.credential import (
    Credential,
    CredentialRepository,
    HashedPassword,
    UserRegistrationRepository,
)
from fedid.domain.user import ActivityId, DisplayName, Email, User, UserRepository
from fedid.infrastructure.persistence.memory.store import InMemoryIdentityStore


class InMemoryUserRepository(UserRepository):
    def __init__(self, store: InMemoryIdentityStore) -> None:
        self._store = store

    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        return self._store.get_user(user_id)

    async def find_by_activity_id(self, activity_id: ActivityId) -> Optional[User]:
        return self._store.get_user_by_activity_id(activity_id)


class InMemoryCredentialRepository(CredentialRepository):
    def __init__(self, store: InMemoryIdentityStore) -> None:
        self._store = store

    async def find_by_activity_id(
        self,
        activity_id: ActivityId,
    ) -> Optional[Credential]:
        return self._store.get_credential(activity_id)

    async def create(
        self,
        user_id: UUID,
        activity_id: ActivityId,
        password_hash: HashedPassword,
        email: Email,
    ) -> Credential:
        return await self._store.add_credential(
            user_id,
            activity_id,
            password_hash,
            email,
        )


class InMemoryUserRegistrationRepository(UserRegistrationRepository):
    def __init__(self, store: InMemoryIdentityStore) -> None:
        self._store = store

    async def register_user_with_credentials(
        self,
        activity_id: ActivityId,
        display_name: DisplayName,
        password_hash: HashedPassword,
        email: Email,
    ) -> User:
        return await self._store.register(
            activity_id,
            display_name,
            password_hash,
            email,
        )
