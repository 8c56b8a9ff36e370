"""User domain manages user identity.

This domain handles:
- User aggregate (id, email, name, password hash, timestamps)
- Email validation
- The storage contract (UserRepository)
"""

from userbase_identity.domain.user.aggregates import User
from userbase_identity.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    UserNotFoundError,
)
from userbase_identity.domain.user.repositories import UserRepository
from userbase_identity.domain.user.value_objects import Email

__all__ = [
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "User",
    "UserNotFoundError",
    "UserRepository",
]
