"""Read-only plant reference lists."""

from fastapi import APIRouter, Depends

from botaniq.api.deps import get_plant_repository
from botaniq.repositories.plant import PlantRepository
from botaniq.schemas.plant import (
    CleanedPlantListResult,
    CleanedPlantResponse,
    PlantFamilyListResult,
    PlantFamilyResponse,
)

router = APIRouter(tags=["plants"])


@router.get("/plants", response_model=CleanedPlantListResult, summary="List plants")
async def list_plants(
    repo: PlantRepository = Depends(get_plant_repository),
) -> CleanedPlantListResult:
    rows = await repo.get_all_plants()
    return CleanedPlantListResult(data=[CleanedPlantResponse.model_validate(r) for r in rows])


@router.get(
    "/plantsandfamily",
    response_model=PlantFamilyListResult,
    summary="List plant families",
)
async def list_plant_families(
    repo: PlantRepository = Depends(get_plant_repository),
) -> PlantFamilyListResult:
    rows = await repo.get_all_families()
    return PlantFamilyListResult(data=[PlantFamilyResponse.model_validate(r) for r in rows])
