"""User listing router."""

from fastapi import APIRouter, Depends

from userbase.presentation.api.dependencies import (
    ListUsersQueryDep,
    get_current_user_context,
)
from userbase.presentation.api.schemas.common import ErrorResponse
from userbase.presentation.api.schemas.users import UserDetailResponse

router = APIRouter(dependencies=[Depends(get_current_user_context)])


@router.get(
    "",
    summary="List users",
    responses={
        200: {"description": "All registered users"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def list_users(query: ListUsersQueryDep) -> list[UserDetailResponse]:
    """List the public projection of every registered user."""
    users = await query.execute()
    return [UserDetailResponse.from_user(user) for user in users]
