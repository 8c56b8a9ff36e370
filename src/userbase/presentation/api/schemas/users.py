"""User projection schemas.

Only the public projection of a user is ever rendered; the password hash
has no field here.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from userbase_identity.domain.user import User


class CamelModel(BaseModel):
    """Base model rendering camelCase JSON keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserResponse(CamelModel):
    """Public projection returned on register and login."""

    id: UUID
    email: str
    name: str | None
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            created_at=user.created_at,
        )


class UserDetailResponse(UserResponse):
    """Public projection including the last modification time."""

    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserDetailResponse":
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
