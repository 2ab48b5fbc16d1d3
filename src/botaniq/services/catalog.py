"""Plant catalog service."""

import logging
from uuid import UUID

from botaniq.config import settings
from botaniq.core.exceptions import PersistenceError
from botaniq.models.garden import GardenEntry
from botaniq.models.recommendation import Recommendation
from botaniq.repositories.garden import GardenRepository
from botaniq.repositories.recommendation import RecommendationRepository
from botaniq.schemas.recommendation import RecommendationCreate

logger = logging.getLogger(__name__)


class CatalogService:
    """Catalog writes that also enroll the caller's garden."""

    def __init__(
        self,
        recommendation_repo: RecommendationRepository,
        garden_repo: GardenRepository,
    ):
        self.recommendation_repo = recommendation_repo
        self.garden_repo = garden_repo
        self.db = recommendation_repo.db

    async def list_recommendations(self) -> list[Recommendation]:
        return await self.recommendation_repo.get_all()

    async def create_with_enrollment(
        self, user_id: UUID, data: RecommendationCreate
    ) -> Recommendation:
        """
        Insert a catalog row and a garden row for the same family.

        Both inserts share one transaction: either both are committed or
        neither is.

        Args:
            user_id: Authenticated principal, owner of the new garden row
            data: Catalog attributes

        Returns:
            The committed catalog row

        Raises:
            PersistenceError: If either insert fails (after rollback)
        """
        try:
            recommendation = await self.recommendation_repo.add(
                Recommendation(**data.model_dump())
            )
            await self.garden_repo.add(GardenEntry(user_id=user_id, family=data.family))
            await self.db.commit()
        except Exception as e:
            if settings.debug:
                logger.exception(
                    "Catalog insert failed", extra={"error_type": type(e).__name__}
                )
            else:
                logger.error("Catalog insert failed", extra={"error_type": type(e).__name__})
            await self.db.rollback()
            raise PersistenceError("DB_001") from e

        logger.info(
            "Catalog entry created",
            extra={"recommendation_id": str(recommendation.id), "user_id": str(user_id)},
        )
        return recommendation
