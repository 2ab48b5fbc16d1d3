"""Garden management endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from botaniq.api.deps import get_current_principal, get_garden_service
from botaniq.schemas.auth import Principal
from botaniq.schemas.garden import (
    GardenCreate,
    GardenCreated,
    GardenListResult,
    GardenResponse,
    GardenUpdate,
)
from botaniq.schemas.user import MessageResponse
from botaniq.services.garden import GardenService

router = APIRouter(prefix="/manajemen", tags=["garden"])

NOT_FOUND_OR_FORBIDDEN = {404: {"description": "Entry not found or owned by another user"}}


@router.post(
    "",
    response_model=GardenCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Add garden entry",
    description="""
    Add a plant to the caller's garden. A catalog row for the family is
    created in the same transaction if none exists yet.
    """,
)
async def create_garden_entry(
    data: GardenCreate,
    principal: Principal = Depends(get_current_principal),
    garden_service: GardenService = Depends(get_garden_service),
) -> GardenCreated:
    entry = await garden_service.create_entry(principal.id, data)
    return GardenCreated(garden_id=entry.id)


@router.get("", response_model=GardenListResult, summary="List all garden entries")
async def list_garden_entries(
    garden_service: GardenService = Depends(get_garden_service),
) -> GardenListResult:
    rows = await garden_service.list_entries()
    return GardenListResult(data=[GardenResponse.model_validate(row) for row in rows])


@router.get(
    "/user/{user_id}",
    response_model=GardenListResult,
    summary="List a user's garden entries",
)
async def list_user_garden_entries(
    user_id: UUID,
    garden_service: GardenService = Depends(get_garden_service),
) -> GardenListResult:
    rows = await garden_service.list_entries_for_user(user_id)
    return GardenListResult(data=[GardenResponse.model_validate(row) for row in rows])


@router.put(
    "/{entry_id}",
    response_model=MessageResponse,
    summary="Update own garden entry",
    responses=NOT_FOUND_OR_FORBIDDEN,
)
async def update_garden_entry(
    entry_id: UUID,
    data: GardenUpdate,
    principal: Principal = Depends(get_current_principal),
    garden_service: GardenService = Depends(get_garden_service),
) -> MessageResponse:
    await garden_service.update_entry(entry_id, principal.id, data)
    return MessageResponse(message="Data updated successfully")


@router.delete(
    "/{entry_id}",
    response_model=MessageResponse,
    summary="Delete own garden entry",
    responses=NOT_FOUND_OR_FORBIDDEN,
)
async def delete_garden_entry(
    entry_id: UUID,
    principal: Principal = Depends(get_current_principal),
    garden_service: GardenService = Depends(get_garden_service),
) -> MessageResponse:
    await garden_service.delete_entry(entry_id, principal.id)
    return MessageResponse(message="Data deleted successfully")
