"""Query to list every registered user."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from userbase_identity.domain.user import User, UserRepository


class ListUsersQuery:
    """Query to retrieve all users, oldest first."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def execute(self) -> list[User]:
        return await self._user_repo.list_users()
