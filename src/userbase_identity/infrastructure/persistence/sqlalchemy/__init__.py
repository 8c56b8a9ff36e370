"""SQLAlchemy implementation for userbase_identity persistence.

Provides:
- UserModel: SQLAlchemy model for users
- UserRepositorySQLAlchemy: Repository implementation for users
"""

from userbase_identity.infrastructure.persistence.sqlalchemy.models import UserModel
from userbase_identity.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "UserModel",
    "UserRepositorySQLAlchemy",
]
