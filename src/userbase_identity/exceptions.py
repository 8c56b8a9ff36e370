"""Authentication exceptions.

These exceptions are raised by the credential service and the token guard
and are rendered by the presentation layer's exception handlers.
"""

from userbase.domain.shared.exceptions import (
    ErrorCode,
    UnauthenticatedError,
    ValidationError,
)


class InvalidTokenError(UnauthenticatedError):
    """Raised when a bearer token is invalid, expired, or malformed.

    The message is the same for every cause so callers cannot tell a
    tampered token from an expired one; the cause goes into ``details``.
    """

    def __init__(self, reason: str | None = None):
        super().__init__(
            "Invalid or expired token",
            ErrorCode.INVALID_TOKEN,
            {"reason": reason} if reason else None,
        )


class InvalidCredentialsError(UnauthenticatedError):
    """Raised when email or password is incorrect during login."""

    def __init__(self) -> None:
        super().__init__("Invalid email or password", ErrorCode.INVALID_CREDENTIALS)


class WeakPasswordError(ValidationError):
    """Raised when a password doesn't meet the configured requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message, ErrorCode.WEAK_PASSWORD)
