"""
Profile API endpoints.

All routes act on the authenticated caller's own account.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, File, UploadFile, status

from api.dependencies import get_profile_service
from api.middleware.auth import get_current_user
from api.models.errors import ErrorResponse, MessageResponse
from shared.models import AuthenticatedUser

from .interfaces import IProfileService
from .models import ProfileResponse

router = APIRouter()

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Account no longer exists"}}


@router.get("/profile", response_model=ProfileResponse, responses=NOT_FOUND)
async def get_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """
    Get the current user's profile.
    """
    return ProfileResponse(user=await service.get_profile(user.id))


@router.put(
    "/profile",
    response_model=ProfileResponse,
    responses={
        **NOT_FOUND,
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_409_CONFLICT: {"model": ErrorResponse, "description": "Email already registered"},
    },
)
async def update_profile(
    fields: Annotated[dict[str, Any], Body()],
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """
    Update any of name, email and bio.

    Only the fields present in the body are changed. The body is
    validated against UpdateProfileRequest by the service.
    """
    return ProfileResponse(user=await service.update_profile(user.id, fields))


@router.post(
    "/upload",
    response_model=ProfileResponse,
    responses={
        **NOT_FOUND,
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_502_BAD_GATEWAY: {"model": ErrorResponse, "description": "Image host failed"},
    },
)
async def upload_picture(
    image: Annotated[UploadFile, File(description="Profile picture (JPEG, PNG, or WebP)")],
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """
    Replace the profile picture.

    Note: This endpoint must remain async because UploadFile.read() is async.
    """
    # One byte past the ceiling is enough to reject an oversized file
    data = await image.read(service.max_picture_bytes + 1)
    updated = await service.upload_picture(user.id, data, image.content_type or "")
    return ProfileResponse(user=updated)


@router.delete("/profile", response_model=MessageResponse, responses=NOT_FOUND)
async def delete_account(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> MessageResponse:
    """
    Delete the current user's account.
    """
    await service.delete_account(user.id)
    return MessageResponse(message="Account deleted")

