"""Application services for identity management."""

from userbase_identity.application.services.credential_service import (
    AuthenticationResult,
    CredentialService,
)
from userbase_identity.application.services.token_guard import TokenGuard

__all__ = ["AuthenticationResult", "CredentialService", "TokenGuard"]
