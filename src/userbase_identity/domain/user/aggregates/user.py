"""User aggregate."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from userbase.domain.shared.time import utc_now
from userbase_identity.domain.user.value_objects.email import Email


class User:
    """
    User aggregate root.

    Holds the password hash so the repository can persist it, but never
    exposes it through ``repr`` and the presentation layer never serializes
    it.
    """

    def __init__(
        self,
        email: Union[str, Email],
        password_hash: str,
        name: str | None = None,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._email = email if isinstance(email, Email) else Email(email)
        self._password_hash = password_hash
        self._name = name
        self._id = id or uuid4()
        now = utc_now()
        self._created_at = created_at or now
        self._updated_at = updated_at or now

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def email_obj(self) -> Email:
        return self._email

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def rename(self, name: str | None) -> None:
        self._name = name
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        email: Union[str, Email],
        password_hash: str,
        name: str | None = None,
    ) -> "User":
        return cls(email=email, password_hash=password_hash, name=name)

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        email: Union[str, Email],
        password_hash: str,
        name: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            password_hash=password_hash,
            name=name,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value})"
