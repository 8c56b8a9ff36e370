"""Credential service for user registration and login."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

from userbase_identity.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UserNotFoundError,
)
from userbase_identity.exceptions import InvalidCredentialsError

if TYPE_CHECKING:
    from userbase_identity.domain.user import UserRepository
    from userbase_identity.services import JWTService, PasswordHashingService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthenticationResult:
    """A user together with a freshly minted bearer token."""

    user: User
    token: str


class CredentialService:
    """
    Application service for credential handling.

    Combines the password hasher, the token signer and the user repository
    to provide:
    - User registration (validate, hash, persist, issue token)
    - Login with password (fetch, verify, issue token)
    - Resolving an already-verified subject to its user

    Failures are raised as domain exceptions and never retried here.
    bcrypt work runs in a worker thread so it never blocks the event loop.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    async def register(
        self,
        email: str,
        password: str,
        name: str | None = None,
    ) -> AuthenticationResult:
        email_obj = Email(email)
        self._password_service.validate_strength(password)

        existing_user = await self._user_repo.find_by_email(email_obj)
        if existing_user is not None:
            raise EmailAlreadyExistsError(email_obj.value)

        password_hash = await asyncio.to_thread(self._password_service.hash, password)
        user = User.create(email_obj, password_hash=password_hash, name=name)
        # A concurrent registration that slipped past the lookup above is
        # rejected by the unique index and surfaces as EmailAlreadyExistsError
        await self._user_repo.insert_user(user)

        token = self._jwt_service.create_token(user.id)

        logger.info("User registered: %s", user.id)
        return AuthenticationResult(user=user, token=token)

    async def login(
        self,
        email: str,
        password: str,
    ) -> AuthenticationResult:
        user = await self._user_repo.find_by_email(email.strip())
        if user is None:
            await asyncio.to_thread(self._password_service.verify_dummy, password)
            logger.warning("Login failed: unknown email")
            raise InvalidCredentialsError

        password_ok = await asyncio.to_thread(
            self._password_service.verify,
            password,
            user.password_hash,
        )
        if not password_ok:
            logger.warning("Login failed: wrong password for user %s", user.id)
            raise InvalidCredentialsError

        token = self._jwt_service.create_token(user.id)

        logger.info("User logged in: %s", user.id)
        return AuthenticationResult(user=user, token=token)

    async def get_self(self, subject: UUID) -> User:
        user = await self._user_repo.find_by_id(subject)
        if user is None:
            raise UserNotFoundError(str(subject))
        return user
