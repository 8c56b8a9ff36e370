"""Shared domain building blocks (exceptions, time helpers)."""

from userbase.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    ErrorCode,
    InfrastructureError,
    NotFoundError,
    UnauthenticatedError,
    ValidationError,
)
from userbase.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    "ConflictError",
    "DomainException",
    "ErrorCode",
    "InfrastructureError",
    "NotFoundError",
    "UnauthenticatedError",
    "ValidationError",
    "ensure_tz_aware",
    "utc_now",
]
