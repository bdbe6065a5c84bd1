"""SQLAlchemy model for user password credentials."""

from uuid import UUID, uuid4

from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from fedid.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class CredentialModel(Base, TimestampMixin):
    """SQLAlchemy model for user password credentials."""

    __tablename__ = "user_credentials"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
        index=True,
    )
    activity_id: Mapped[str] = mapped_column(
        String(512),
        unique=True,
        nullable=False,
        index=True,
    )
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return (
            f"<CredentialModel(id={self.id}, user_id={self.user_id}, "
            f"activity_id={self.activity_id})>"
        )
