"""Plant catalog endpoints."""

from fastapi import APIRouter, Depends, status

from botaniq.api.deps import get_catalog_service, get_current_principal
from botaniq.schemas.auth import Principal
from botaniq.schemas.recommendation import (
    RecommendationCreate,
    RecommendationCreated,
    RecommendationListResult,
    RecommendationResponse,
)
from botaniq.services.catalog import CatalogService

router = APIRouter(prefix="/rekomendasi", tags=["catalog"])


@router.post(
    "",
    response_model=RecommendationCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Add catalog entry",
    description="""
    Add a plant to the catalog and enroll its family in the caller's garden.

    Both rows are written in one transaction.
    """,
)
async def create_recommendation(
    data: RecommendationCreate,
    principal: Principal = Depends(get_current_principal),
    catalog_service: CatalogService = Depends(get_catalog_service),
) -> RecommendationCreated:
    recommendation = await catalog_service.create_with_enrollment(principal.id, data)
    return RecommendationCreated(recommendation_id=recommendation.id)


@router.get(
    "",
    response_model=RecommendationListResult,
    summary="List catalog entries",
)
async def list_recommendations(
    catalog_service: CatalogService = Depends(get_catalog_service),
) -> RecommendationListResult:
    rows = await catalog_service.list_recommendations()
    return RecommendationListResult(
        data=[RecommendationResponse.model_validate(row) for row in rows]
    )
