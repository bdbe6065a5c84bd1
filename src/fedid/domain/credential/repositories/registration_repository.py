"""Atomic user + credential registration interface."""

from abc import ABC, abstractmethod

from fedid.domain.credential.value_objects.hashed_password import HashedPassword
from fedid.domain.user.aggregates.user import User
from fedid.domain.user.value_objects.activity_id import ActivityId
from fedid.domain.user.value_objects.display_name import DisplayName
from fedid.domain.user.value_objects.email import Email


class UserRegistrationRepository(ABC):
    """Creates a User and its Credential as one unit of work."""

    @abstractmethod
    async def register_user_with_credentials(
        self,
        activity_id: ActivityId,
        display_name: DisplayName,
        password_hash: HashedPassword,
        email: Email,
    ) -> User:
        """Persist a new user together with its credential.

        Either both records exist afterwards or neither does.

        Parameters
        ----------
        activity_id
            Activity id of the new user
        display_name
            Display name of the new user
        password_hash
            Already hashed password
        email
            Contact address stored with the credential

        Returns
        -------
        The newly created User

        Raises
        ------
        RegistrationConflictError
            If the activity id or email is already registered
        RepositoryError
            If the store fails
        """
