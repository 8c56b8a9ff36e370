"""FastAPI dependency injection for the Userbase API.

Provides dependencies for:
- Database sessions
- Authentication (subject from the bearer token)
- Service instances

Shared collaborators (settings, database, token signer, password hasher,
token guard) are built once by ``create_app`` and read from ``app.state``.
"""

import logging
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from userbase.infrastructure.persistence.sqlalchemy import Database
from userbase_config.settings import Settings
from userbase_identity import (
    CredentialService,
    JWTService,
    ListUsersQuery,
    PasswordHashingService,
    TokenGuard,
    UserContext,
)
from userbase_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Application state
# -----------------------------------------------------------------------------


def get_app_settings(request: Request) -> Settings:
    """Get the settings the application was created with."""
    return request.app.state.settings


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_jwt_service(request: Request) -> JWTService:
    return request.app.state.jwt_service


def get_password_service(request: Request) -> PasswordHashingService:
    return request.app.state.password_service


def get_token_guard(request: Request) -> TokenGuard:
    return request.app.state.token_guard


SettingsDep = Annotated[Settings, Depends(get_app_settings)]


# -----------------------------------------------------------------------------
# Database Session
# -----------------------------------------------------------------------------


async def get_db_session(
    database: Database = Depends(get_database),
) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.
    Uncommitted work is rolled back when the session closes.

    Yields
    ------
    AsyncSession for database operations
    """
    async with database.session_maker() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Credential Service & Queries
# -----------------------------------------------------------------------------


async def get_credential_service(
    session: DBSession,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> CredentialService:
    """
    Get credential service with all dependencies.

    This service orchestrates user registration, login and self lookup.
    """
    return CredentialService(
        user_repository=UserRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


# Type alias for injected credential service
CredentialServiceDep = Annotated[CredentialService, Depends(get_credential_service)]


async def get_list_users_query(session: DBSession) -> ListUsersQuery:
    return ListUsersQuery(UserRepositorySQLAlchemy(session))


ListUsersQueryDep = Annotated[ListUsersQuery, Depends(get_list_users_query)]


# -----------------------------------------------------------------------------
# Current Subject (bearer token)
# -----------------------------------------------------------------------------


async def get_current_user_context(
    request: Request,
    token_guard: TokenGuard = Depends(get_token_guard),
) -> UserContext:
    """
    FastAPI dependency gating protected endpoints.

    Verifies the bearer token from the Authorization header and attaches the
    resulting UserContext to ``request.state.user_context``. Raises an
    UnauthenticatedError (rendered as 401) before the handler runs when the
    header is missing or the token is invalid or expired.
    """
    user_context = token_guard.authenticate(request.headers.get("Authorization"))
    request.state.user_context = user_context
    return user_context


# Type alias for injected user context
CurrentUserContext = Annotated[UserContext, Depends(get_current_user_context)]
