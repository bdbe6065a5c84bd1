"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from fedid.domain.user.aggregates.user import User
from fedid.domain.user.value_objects.activity_id import ActivityId


class UserRepository(ABC):
    """Repository interface for User aggregates.

    Implementations raise RepositoryError when the store is unreachable.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_activity_id(self, activity_id: ActivityId) -> Optional[User]:
        """Find a user by their activity id."""
