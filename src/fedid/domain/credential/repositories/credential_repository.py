"""Credential repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from fedid.domain.credential.entities.credential import Credential
from fedid.domain.credential.value_objects.hashed_password import HashedPassword
from fedid.domain.user.value_objects.activity_id import ActivityId
from fedid.domain.user.value_objects.email import Email


class CredentialRepository(ABC):
    """Storage access for password credentials.

    Only fetches and stores; password verification happens in the
    application layer.
    """

    @abstractmethod
    async def find_by_activity_id(
        self,
        activity_id: ActivityId,
    ) -> Optional[Credential]:
        """Find the credential registered for an activity id.

        Parameters
        ----------
        activity_id
            Activity id the user logs in with

        Returns
        -------
        The credential, or None if nobody registered that id

        Raises
        ------
        RepositoryError
            If the store fails or holds a malformed hash
        """

    @abstractmethod
    async def create(
        self,
        user_id: UUID,
        activity_id: ActivityId,
        password_hash: HashedPassword,
        email: Email,
    ) -> Credential:
        """Store a credential for an existing user.

        Raises
        ------
        RegistrationConflictError
            If the activity id or email is already taken
        RepositoryError
            If the store fails
        """
