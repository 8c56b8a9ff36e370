"""Bearer token guard for protected requests."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from userbase.domain.shared.exceptions import UnauthenticatedError
from userbase_identity.application.context import UserContext
from userbase_identity.exceptions import InvalidTokenError

if TYPE_CHECKING:
    from userbase_identity.services import JWTService

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"


class TokenGuard:
    """Turns an ``Authorization`` header into a verified UserContext.

    Stateless: checks signature and expiry against the shared secret and
    never looks the user up in storage, so tokens of a user removed after
    issuance keep working until they expire.
    """

    def __init__(self, jwt_service: JWTService) -> None:
        self._jwt_service = jwt_service

    @staticmethod
    def extract_token(authorization: str | None) -> str:
        """Return the token from a ``Bearer <token>`` header value.

        Raises
        ------
        UnauthenticatedError
            If the header is missing, uses another scheme, or has no token
        """
        if not authorization:
            raise UnauthenticatedError

        scheme, _, token = authorization.strip().partition(" ")
        token = token.strip()
        if scheme.lower() != BEARER_SCHEME or not token or " " in token:
            raise UnauthenticatedError

        return token

    def verify(self, token: str) -> UserContext:
        """Verify a raw token.

        Raises
        ------
        InvalidTokenError
            If the signature is wrong, the token is malformed or expired
        """
        try:
            payload = self._jwt_service.verify_token(token)
        except InvalidTokenError as e:
            logger.warning("Rejected bearer token: %s", e.details.get("reason"))
            raise

        return UserContext.from_token(payload)

    def authenticate(self, authorization: str | None) -> UserContext:
        """Extract and verify the bearer token of a request."""
        return self.verify(self.extract_token(authorization))
