"""SQLAlchemy implementation of UserRegistrationRepository."""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from fedid.domain.credential import HashedPassword, UserRegistrationRepository
from fedid.domain.shared.exceptions import RepositoryError
from fedid.domain.user import (
    ActivityId,
    DisplayName,
    Email,
    RegistrationConflictError,
    User,
)
from fedid.infrastructure.persistence.sqlalchemy.models import (
    CredentialModel,
    UserModel,
)
from fedid.infrastructure.persistence.sqlalchemy.repositories.credential_repository import (  # noqa: E501
    conflict_field,
)

logger = logging.getLogger(__name__)


class UserRegistrationRepositorySQLAlchemy(UserRegistrationRepository):
    """Inserts the users row and the user_credentials row in one transaction.

    Both rows are flushed inside the session's transaction; a unique
    violation on either rolls the whole transaction back. Committing is left
    to the caller.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def register_user_with_credentials(
        self,
        activity_id: ActivityId,
        display_name: DisplayName,
        password_hash: HashedPassword,
        email: Email,
    ) -> User:
        user = User.create(activity_id=activity_id, display_name=display_name)

        try:
            self._session.add(
                UserModel(
                    id=user.id,
                    activity_id=activity_id.value,
                    display_name=display_name.value,
                    icon_url=user.icon_url,
                ),
            )
            # users row first: user_credentials.user_id references it
            await self._session.flush()

            self._session.add(
                CredentialModel(
                    user_id=user.id,
                    activity_id=activity_id.value,
                    email=email.value,
                    password_hash=password_hash.value,
                ),
            )
            await self._session.flush()
        except IntegrityError as e:
            await self._session.rollback()
            raise RegistrationConflictError(
                details={"field": conflict_field(e)},
            ) from e
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error("Registration of %s failed: %s", activity_id.value, e)
            raise RepositoryError("Failed to store new user") from e

        logger.info("Created user %s with credentials", user.id)
        return user
