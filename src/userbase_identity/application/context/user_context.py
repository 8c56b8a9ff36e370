"""User context for request-scoped user identity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from userbase_identity.schemas import TokenPayload


@dataclass(frozen=True)
class UserContext:
    """Immutable context for the current authenticated subject.

    Built from verified token claims only; the user row is not loaded.
    """

    user_id: UUID

    @classmethod
    def from_token(cls, payload: TokenPayload) -> UserContext:
        return cls(user_id=payload.subject)

    def __str__(self) -> str:
        return f"UserContext({self.user_id})"
