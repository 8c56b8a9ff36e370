"""Identity services - JWT and password hashing."""

from userbase_identity.services.jwt_service import JWTService
from userbase_identity.services.password_service import PasswordHashingService

__all__ = [
    "JWTService",
    "PasswordHashingService",
]
