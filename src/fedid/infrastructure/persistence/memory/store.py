"""Dictionary backed identity store.

Keeps users and credentials in process memory with the same uniqueness rules
as the relational schema. Used for tests and single-process development.
"""

import asyncio
import logging
from uuid import UUID

from fedid.domain.credential import Credential, HashedPassword
from fedid.domain.user import (
    ActivityId,
    DisplayName,
    Email,
    RegistrationConflictError,
    User,
)

logger = logging.getLogger(__name__)


class InMemoryIdentityStore:
    """Users and credentials indexed by id, activity id and email.

    All writes go through one asyncio.Lock, so a check-then-insert is atomic
    with respect to other coroutines on the same event loop.
    """

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._users: dict[UUID, User] = {}
        self._users_by_activity_id: dict[str, UUID] = {}
        self._credentials: dict[str, Credential] = {}
        self._emails: set[str] = set()

    def get_user(self, user_id: UUID) -> User | None:
        return self._users.get(user_id)

    def get_user_by_activity_id(self, activity_id: ActivityId) -> User | None:
        user_id = self._users_by_activity_id.get(activity_id.value)
        return self._users.get(user_id) if user_id else None

    def get_credential(self, activity_id: ActivityId) -> Credential | None:
        return self._credentials.get(activity_id.value)

    @property
    def user_count(self) -> int:
        return len(self._users)

    @property
    def credential_count(self) -> int:
        return len(self._credentials)

    async def add_credential(
        self,
        user_id: UUID,
        activity_id: ActivityId,
        password_hash: HashedPassword,
        email: Email,
    ) -> Credential:
        async with self._lock:
            self._check_credential_free(activity_id, email)
            credential = Credential(
                user_id=user_id,
                activity_id=activity_id,
                password_hash=password_hash,
                email=email,
            )
            self._insert_credential(credential)
        return credential

    async def register(
        self,
        activity_id: ActivityId,
        display_name: DisplayName,
        password_hash: HashedPassword,
        email: Email,
    ) -> User:
        """Insert a user and its credential, or neither."""
        async with self._lock:
            if activity_id.value in self._users_by_activity_id:
                raise RegistrationConflictError(details={"field": "activity_id"})
            self._check_credential_free(activity_id, email)

            user = User.create(activity_id=activity_id, display_name=display_name)
            credential = Credential(
                user_id=user.id,
                activity_id=activity_id,
                password_hash=password_hash,
                email=email,
            )

            self._users[user.id] = user
            self._users_by_activity_id[activity_id.value] = user.id
            self._insert_credential(credential)

        logger.info("Created user %s with credentials", user.id)
        return user

    def _check_credential_free(self, activity_id: ActivityId, email: Email) -> None:
        if activity_id.value in self._credentials:
            raise RegistrationConflictError(details={"field": "activity_id"})
        if email.value in self._emails:
            raise RegistrationConflictError(details={"field": "email"})

    def _insert_credential(self, credential: Credential) -> None:
        self._credentials[credential.activity_id.value] = credential
        self._emails.add(credential.email)
