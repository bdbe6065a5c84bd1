"""User aggregate: the public identity of an account."""

from typing import Union
from uuid import UUID, uuid4

from fedid.domain.user.value_objects.activity_id import ActivityId
from fedid.domain.user.value_objects.display_name import DisplayName


class User:
    """
    User aggregate root.

    Holds the identity other servers see: activity id, display name and icon.
    Secrets live in the separate Credential entity. Created once at
    registration and read-only afterwards.
    """

    def __init__(
        self,
        activity_id: Union[str, ActivityId],
        display_name: Union[str, DisplayName],
        icon_url: str | None = None,
        id: UUID | None = None,
    ):
        self._activity_id = (
            activity_id
            if isinstance(activity_id, ActivityId)
            else ActivityId(activity_id)
        )
        self._display_name = (
            display_name
            if isinstance(display_name, DisplayName)
            else DisplayName(display_name)
        )
        self._icon_url = icon_url
        self._id = id or uuid4()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def activity_id(self) -> ActivityId:
        return self._activity_id

    @property
    def display_name(self) -> str:
        return self._display_name.value

    @property
    def icon_url(self) -> str | None:
        return self._icon_url

    @classmethod
    def create(
        cls,
        activity_id: Union[str, ActivityId],
        display_name: Union[str, DisplayName],
        icon_url: str | None = None,
    ) -> "User":
        return cls(
            activity_id=activity_id,
            display_name=display_name,
            icon_url=icon_url,
        )

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        activity_id: Union[str, ActivityId],
        display_name: Union[str, DisplayName],
        icon_url: str | None,
    ) -> "User":
        return cls(
            id=id,
            activity_id=activity_id,
            display_name=display_name,
            icon_url=icon_url,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, activity_id={self._activity_id.value})"
