"""Userbase Identity - registration, login and bearer-token authentication.

This module handles all identity-related concerns:
- User aggregate and its storage contract
- Password hashing (bcrypt)
- Token signing and verification (JWT, HS256)
- The credential service (register, login, get_self)
- The token guard that gates protected requests

Architecture:
    userbase_identity/
    ├── domain/            # User aggregate, Email, UserRepository
    ├── services/          # Pure logic (password hashing, JWT)
    ├── application/       # CredentialService, TokenGuard, queries
    ├── infrastructure/    # SQLAlchemy model and repository
    ├── schemas.py         # Token claims
    └── exceptions.py      # Auth exceptions
"""

from userbase_identity.application.context import UserContext
from userbase_identity.application.queries import ListUsersQuery
from userbase_identity.application.services import (
    AuthenticationResult,
    CredentialService,
    TokenGuard,
)
from userbase_identity.domain.user import (
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
    User,
    UserNotFoundError,
    UserRepository,
)
from userbase_identity.exceptions import (
    InvalidCredentialsError,
    InvalidTokenError,
    WeakPasswordError,
)
from userbase_identity.schemas import TokenPayload
from userbase_identity.services import (
    JWTService,
    PasswordHashingService,
)

__all__ = [
    # Domain - User
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    # Exceptions
    "InvalidCredentialsError",
    "InvalidTokenError",
    "WeakPasswordError",
    # Schemas
    "TokenPayload",
    # Services
    "JWTService",
    "PasswordHashingService",
    # Application
    "AuthenticationResult",
    "CredentialService",
    "ListUsersQuery",
    "TokenGuard",
    "UserContext",
]
