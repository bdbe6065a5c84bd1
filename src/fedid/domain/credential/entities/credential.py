"""Credential entity: the stored secret of exactly one user."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from fedid.domain.credential.value_objects.hashed_password import HashedPassword
from fedid.domain.shared.time import utc_now
from fedid.domain.user.value_objects.activity_id import ActivityId
from fedid.domain.user.value_objects.email import Email


class Credential:
    """
    Password credential bound to a User.

    Never exists on its own: it is created together with its User in a single
    registration call and references it through ``user_id``.
    """

    def __init__(  # noqa: PLR0913
        self,
        user_id: UUID,
        activity_id: Union[str, ActivityId],
        password_hash: HashedPassword,
        email: Union[str, Email],
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._user_id = user_id
        self._activity_id = (
            activity_id
            if isinstance(activity_id, ActivityId)
            else ActivityId(activity_id)
        )
        self._password_hash = password_hash
        self._email = email if isinstance(email, Email) else Email(email)
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def activity_id(self) -> ActivityId:
        return self._activity_id

    @property
    def password_hash(self) -> HashedPassword:
        return self._password_hash

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def change_password(self, new_hash: HashedPassword) -> None:
        self._password_hash = new_hash
        self._updated_at = utc_now()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Credential):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Credential(id={self._id}, user_id={self._user_id}, "
            f"activity_id={self._activity_id.value})"
        )
