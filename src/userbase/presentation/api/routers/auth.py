"""Authentication router for user registration, login and self lookup."""

import logging

from fastapi import APIRouter, status

from userbase.domain.shared.exceptions import DomainException
from userbase.presentation.api.dependencies import (
    CredentialServiceDep,
    CurrentUserContext,
    DBSession,
)
from userbase.presentation.api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    MeResponse,
    RegisterRequest,
)
from userbase.presentation.api.schemas.common import ErrorResponse
from userbase.presentation.api.schemas.users import (
    UserDetailResponse,
    UserResponse,
)
from userbase_identity import AuthenticationResult

logger = logging.getLogger(__name__)

router = APIRouter()


def _create_auth_response(message: str, result: AuthenticationResult) -> AuthResponse:
    return AuthResponse(
        message=message,
        user=UserResponse.from_user(result.user),
        token=result.token,
    )


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        400: {"model": ErrorResponse, "description": "Invalid input"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
    },
)
async def register(
    request: RegisterRequest,
    credential_service: CredentialServiceDep,
    session: DBSession,
) -> AuthResponse:
    """
    Create an account and return it together with a bearer token.

    The password is stored only as a bcrypt hash and is never returned.
    """
    try:
        result = await credential_service.register(
            email=request.email,
            password=request.password,
            name=request.name,
        )
        await session.commit()
    except DomainException:
        await session.rollback()
        raise

    return _create_auth_response("User registered successfully", result)


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        400: {"model": ErrorResponse, "description": "Invalid input"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
)
async def login(
    request: LoginRequest,
    credential_service: CredentialServiceDep,
) -> AuthResponse:
    """
    Authenticate with email and password.

    Unknown emails and wrong passwords produce the same 401 response.
    """
    result = await credential_service.login(
        email=request.email,
        password=request.password,
    )
    return _create_auth_response("Login successful", result)


@router.get(
    "/me",
    summary="Get current user",
    responses={
        200: {"description": "Current user data"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "User no longer exists"},
    },
)
async def get_me(
    user_context: CurrentUserContext,
    credential_service: CredentialServiceDep,
) -> MeResponse:
    """
    Get the current authenticated user's information.

    Requires a valid bearer token in the Authorization header.
    """
    user = await credential_service.get_self(user_context.user_id)
    return MeResponse(user=UserDetailResponse.from_user(user))
