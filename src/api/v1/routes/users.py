"""User profile API routes."""

from fastapi import APIRouter, Depends

from api.v1.dependencies import get_profile_service
from api.v1.schemas.common import ErrorResponse
from api.v1.schemas.user import UserResponse, UserUpdate
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/users", tags=["users"])


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    response_model_by_alias=True,
    response_model_exclude_none=True,
    summary="Get a user profile",
    responses={404: {"model": ErrorResponse, "description": "User not found"}},
)
async def get_user(
    user_id: str,
    service: ProfileService = Depends(get_profile_service),
) -> UserResponse:
    profile = await service.get(user_id)
    return UserResponse.from_entity(profile)


@router.patch(
    "/{user_id}",
    response_model=UserResponse,
    response_model_by_alias=True,
    response_model_exclude_none=True,
    summary="Update a user profile",
    responses={
        200: {"description": "Profile updated; full authoritative profile returned"},
        404: {"model": ErrorResponse, "description": "User not found"},
        422: {"model": ErrorResponse, "description": "Unknown or invalid fields"},
    },
)
async def update_user(
    user_id: str,
    body: UserUpdate,
    service: ProfileService = Depends(get_profile_service),
) -> UserResponse:
    """Apply a partial update of the editable fields (names, bio, avatar)."""
    profile = await service.update(user_id, body.to_patch())
    return UserResponse.from_entity(profile)
