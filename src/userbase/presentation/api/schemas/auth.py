"""Authentication schemas for request/response models."""

from pydantic import BaseModel, ConfigDict, Field

from userbase.presentation.api.schemas.users import (
    CamelModel,
    UserDetailResponse,
    UserResponse,
)


class RegisterRequest(BaseModel):
    """Request schema for user registration."""

    email: str = Field(..., min_length=1, max_length=255, description="User's email address")
    password: str = Field(..., min_length=1, description="Password (must not be empty)")
    name: str | None = Field(default=None, max_length=255, description="Display name")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "securepassword123",
                "name": "Ada",
            },
        },
    )


class LoginRequest(BaseModel):
    """Request schema for user login."""

    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "securepassword123",
            },
        },
    )


class AuthResponse(CamelModel):
    """Response schema for authentication (login/register)."""

    message: str
    user: UserResponse
    token: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "message": "Login successful",
                "user": {
                    "id": "550e8400-e29b-41d4-a716-446655440000",
                    "email": "user@example.com",
                    "name": "Ada",
                    "createdAt": "2024-12-05T10:30:00Z",
                },
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
            },
        },
    )


class MeResponse(CamelModel):
    """Response schema for the current user."""

    user: UserDetailResponse
