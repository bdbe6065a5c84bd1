"""SQLAlchemy implementation of CredentialRepository."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from fedid.domain.credential import (
    Credential,
    CredentialRepository,
    HashedPassword,
    InvalidCredentialFormatError,
)
from fedid.domain.shared.exceptions import RepositoryError
from fedid.domain.shared.time import ensure_tz_aware
from fedid.domain.user import ActivityId, Email, RegistrationConflictError
from fedid.infrastructure.persistence.sqlalchemy.models import CredentialModel

logger = logging.getLogger(__name__)


def map_credential_to_domain(model: CredentialModel) -> Credential:
    """Build a Credential from its row.

    Raises
    ------
    RepositoryError
        If the stored hash is not a well-formed Argon2 string
    """
    try:
        password_hash = HashedPassword.from_stored_hash(model.password_hash)
    except InvalidCredentialFormatError as e:
        logger.error("Malformed password hash stored for %s", model.activity_id)
        raise RepositoryError(
            "Stored password hash is malformed",
            details={"activity_id": model.activity_id},
        ) from e

    return Credential(
        id=model.id,
        user_id=model.user_id,
        activity_id=model.activity_id,
        password_hash=password_hash,
        email=model.email,
        created_at=ensure_tz_aware(model.created_at),
        updated_at=ensure_tz_aware(model.updated_at),
    )


def conflict_field(error: IntegrityError) -> str:
    """Best-effort name of the unique column an IntegrityError refers to."""
    text = str(error.orig).lower()
    if "email" in text:
        return "email"
    return "activity_id"


class CredentialRepositorySQLAlchemy(CredentialRepository):
    """SQLAlchemy implementation of the CredentialRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_activity_id(
        self,
        activity_id: ActivityId,
    ) -> Optional[Credential]:
        stmt = select(CredentialModel).where(
            CredentialModel.activity_id == activity_id.value,
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error("Credential lookup failed: %s", e)
            raise RepositoryError("Credential lookup failed") from e

        model = result.scalar_one_or_none()
        if model is None:
            return None
        return map_credential_to_domain(model)

    async def create(
        self,
        user_id: UUID,
        activity_id: ActivityId,
        password_hash: HashedPassword,
        email: Email,
    ) -> Credential:
        model = CredentialModel(
            user_id=user_id,
            activity_id=activity_id.value,
            email=email.value,
            password_hash=password_hash.value,
        )
        self._session.add(model)

        try:
            await self._session.flush()
        except IntegrityError as e:
            await self._session.rollback()
            raise RegistrationConflictError(
                details={"field": conflict_field(e)},
            ) from e
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error("Failed to store credential: %s", e)
            raise RepositoryError("Failed to store credential") from e

        logger.info("Created credentials for user: %s", user_id)
        return map_credential_to_domain(model)
