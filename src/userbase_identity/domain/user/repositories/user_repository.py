"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union
from uuid import UUID

from userbase_identity.domain.user.aggregates.user import User
from userbase_identity.domain.user.value_objects.email import Email


class UserRepository(ABC):
    """Repository interface for User aggregates.

    Implementations must enforce email uniqueness themselves and raise
    ``EmailAlreadyExistsError`` when an insert violates it.
    """

    @abstractmethod
    async def insert_user(self, user: User) -> None:
        """Persist a new user."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """Find a user by their email address (exact match)."""

    @abstractmethod
    async def list_users(self) -> list[User]:
        """List all users, oldest first."""
