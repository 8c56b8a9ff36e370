"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Union
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from userbase.domain.shared.exceptions import InfrastructureError
from userbase.domain.shared.time import ensure_tz_aware
from userbase_identity.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UserRepository,
)
from userbase_identity.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


def _is_unique_violation(error: IntegrityError) -> bool:
    text = str(error.orig if error.orig is not None else error).lower()
    return "unique" in text or "duplicate" in text


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface.

    Database failures are re-raised as InfrastructureError; the original
    exception is chained for the logs and never reaches the client.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def insert_user(self, user: User) -> None:
        self._session.add(self._map_to_model(user))

        try:
            await self._session.flush()
        except IntegrityError as e:
            if _is_unique_violation(e):
                raise EmailAlreadyExistsError(user.email) from e
            raise
        except SQLAlchemyError as e:
            logger.exception("Failed to insert user %s", user.id)
            raise InfrastructureError from e

        logger.info("Created user: %s", user.id)

    async def find_by_id(self, user_id: UUID) -> User | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        model = await self._scalar_one_or_none(stmt)

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_email(self, email: Union[str, Email]) -> User | None:
        email_value = email.value if isinstance(email, Email) else email

        stmt = select(UserModel).where(UserModel.email == email_value)
        model = await self._scalar_one_or_none(stmt)

        if model is None:
            return None

        return self._map_to_domain(model)

    async def list_users(self) -> list[User]:
        stmt = select(UserModel).order_by(UserModel.created_at, UserModel.email)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            logger.exception("Failed to list users")
            raise InfrastructureError from e
        models = result.scalars().all()
        return [self._map_to_domain(model) for model in models]

    async def _scalar_one_or_none(self, stmt) -> UserModel | None:
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            logger.exception("User lookup failed")
            raise InfrastructureError from e
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            email=model.email,
            password_hash=model.password_hash,
            name=model.name,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            email=user.email,
            name=user.name,
            password_hash=user.password_hash,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
