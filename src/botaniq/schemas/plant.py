"""Pydantic schemas for the plant reference lists."""

from pydantic import BaseModel, ConfigDict


class CleanedPlantResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    latin: str | None = None
    family: str | None = None
    common_name: str | None = None
    category: str | None = None
    climate: str | None = None
    ideal_light: str | None = None
    watering: str | None = None
    temp_max_celsius: float | None = None
    temp_min_celsius: float | None = None


class PlantFamilyResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    plant_name: str
    family: str


class CleanedPlantListResult(BaseModel):
    status: str = "success"
    data: list[CleanedPlantResponse]


class PlantFamilyListResult(BaseModel):
    status: str = "success"
    data: list[PlantFamilyResponse]
