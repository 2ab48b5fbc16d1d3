"""Pydantic schemas for the plant catalog."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class RecommendationCreate(BaseModel):
    """Full catalog attribute set."""

    latin: str | None = Field(None, max_length=255, description="Latin name")
    family: str = Field(..., min_length=1, max_length=255, description="Plant family")
    category: str | None = Field(None, max_length=255)
    climate: str | None = Field(None, max_length=255)
    ideal_light: str | None = Field(None, max_length=255)
    tolerated_light: str | None = Field(None, max_length=255)
    watering: str | None = Field(None, max_length=255)
    insects: str | None = Field(None, max_length=500)
    plant_use: str | None = Field(None, max_length=500)
    temp_max_celsius: float | None = None
    temp_min_celsius: float | None = None


class RecommendationResponse(RecommendationCreate):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    created_at: datetime
    updated_at: datetime


class RecommendationCreated(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str = "Recommendation added and enrolled in garden management"
    recommendation_id: UUID = Field(..., alias="rekomendasiId")


class RecommendationListResult(BaseModel):
    status: str = "success"
    data: list[RecommendationResponse]
