"""Pydantic schemas for API request/response models."""

from userbase.presentation.api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    MeResponse,
    RegisterRequest,
)
from userbase.presentation.api.schemas.common import (
    ErrorResponse,
    FieldErrorResponse,
    HealthResponse,
)
from userbase.presentation.api.schemas.users import (
    UserDetailResponse,
    UserResponse,
)

__all__ = [
    "AuthResponse",
    "ErrorResponse",
    "FieldErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "MeResponse",
    "RegisterRequest",
    "UserDetailResponse",
    "UserResponse",
]
