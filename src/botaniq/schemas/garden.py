"""Pydantic schemas for garden management."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class GardenFields(BaseModel):
    plant_name: str | None = Field(None, max_length=255)
    growth: str | None = Field(None, max_length=100, description="Growth stage")
    soil: str | None = Field(None, max_length=255)
    sunlight: str | None = Field(None, max_length=255)
    watering: str | None = Field(None, max_length=255)
    fertilization_type: str | None = Field(None, max_length=255)


class GardenCreate(GardenFields):
    family: str = Field(..., min_length=1, max_length=255, description="Plant family")


class GardenUpdate(GardenFields):
    """Only the fields present in the request body are written."""

    pass


class GardenResponse(GardenFields):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    family: str | None = None
    created_at: datetime
    updated_at: datetime


class GardenCreated(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str = "Garden entry added and linked to the catalog"
    garden_id: UUID = Field(..., alias="manajemenId")


class GardenListResult(BaseModel):
    status: str = "success"
    data: list[GardenResponse]
