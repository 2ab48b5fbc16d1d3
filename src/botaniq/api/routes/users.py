"""Profile endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, UploadFile

from botaniq.api.deps import get_current_principal, get_profile_service
from botaniq.core.exceptions import NotFoundError
from botaniq.schemas.auth import Principal
from botaniq.schemas.user import (
    MessageResponse,
    ProfileData,
    ProfileResponse,
    ProfileUpdate,
)
from botaniq.services.profile import ProfileService

router = APIRouter(tags=["users"])


@router.get(
    "/profile",
    response_model=ProfileResponse,
    summary="Get current profile",
    responses={404: {"description": "User not found"}},
)
async def get_profile(
    principal: Principal = Depends(get_current_principal),
    profile_service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Return the authenticated user's public profile fields."""
    user = await profile_service.get_profile(principal.id)
    return ProfileResponse(data=ProfileData.model_validate(user))


@router.put(
    "/users/{user_id}",
    response_model=MessageResponse,
    summary="Update profile",
    description="""
    Update profile fields and optionally replace the avatar.

    Send `multipart/form-data`. Omitted fields keep their stored values.
    The `avatar` file part is limited by `UPLOAD_MAX_BYTES` (default 10 MB).
    """,
    responses={
        404: {"description": "User not found or not the caller"},
        413: {"description": "Avatar too large"},
    },
)
async def update_user(
    user_id: UUID,
    name: Annotated[str | None, Form()] = None,
    last_name: Annotated[str | None, Form()] = None,
    phone: Annotated[str | None, Form()] = None,
    address: Annotated[str | None, Form()] = None,
    country: Annotated[str | None, Form()] = None,
    city: Annotated[str | None, Form()] = None,
    avatar: Annotated[UploadFile | None, File()] = None,
    principal: Principal = Depends(get_current_principal),
    profile_service: ProfileService = Depends(get_profile_service),
) -> MessageResponse:
    """
    Partially update the caller's own profile.

    Raises:
        404: `user_id` is not the caller (reported like a missing user)
        413: Avatar exceeds the upload limit
    """
    if user_id != principal.id:
        raise NotFoundError("USER_001")

    changes = ProfileUpdate(
        name=name,
        last_name=last_name,
        phone=phone,
        address=address,
        country=country,
        city=city,
    )
    await profile_service.update_profile(principal.id, changes, avatar)
    return MessageResponse(message="User updated successfully")
