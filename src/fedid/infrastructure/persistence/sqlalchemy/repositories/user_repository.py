"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from fedid.domain.shared.exceptions import RepositoryError
from fedid.domain.user import ActivityId, User, UserRepository
from fedid.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


def map_user_to_domain(model: UserModel) -> User:
    return User.reconstitute(
        id=model.id,
        activity_id=model.activity_id,
        display_name=model.display_name,
        icon_url=model.icon_url,
    )


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.id == user_id)
        return await self._find_one(stmt)

    async def find_by_activity_id(self, activity_id: ActivityId) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.activity_id == activity_id.value)
        return await self._find_one(stmt)

    async def _find_one(self, stmt: Select) -> Optional[User]:
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error("User lookup failed: %s", e)
            raise RepositoryError("User lookup failed") from e

        model = result.scalar_one_or_none()
        if model is None:
            return None
        return map_user_to_domain(model)
