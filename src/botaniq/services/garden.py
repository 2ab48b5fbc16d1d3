"""Garden management service."""

import logging
from uuid import UUID

from botaniq.config import settings
from botaniq.core.exceptions import NotFoundError, PersistenceError
from botaniq.models.garden import GardenEntry
from botaniq.repositories.garden import GardenRepository
from botaniq.repositories.recommendation import RecommendationRepository
from botaniq.schemas.garden import GardenCreate, GardenUpdate

logger = logging.getLogger(__name__)


class GardenService:
    """Per-user garden entries; mutations are scoped to the owner."""

    def __init__(
        self,
        garden_repo: GardenRepository,
        recommendation_repo: RecommendationRepository,
    ):
        self.garden_repo = garden_repo
        self.recommendation_repo = recommendation_repo
        self.db = garden_repo.db

    async def list_entries(self) -> list[GardenEntry]:
        return await self.garden_repo.get_all()

    async def list_entries_for_user(self, user_id: UUID) -> list[GardenEntry]:
        return await self.garden_repo.get_all_by_user(user_id)

    async def create_entry(self, user_id: UUID, data: GardenCreate) -> GardenEntry:
        """
        Insert a garden row, adding a catalog row for its family if missing.

        Raises:
            PersistenceError: If any step fails (after rollback)
        """
        try:
            added = await self.recommendation_repo.add_family_if_absent(data.family)
            entry = await self.garden_repo.add(GardenEntry(user_id=user_id, **data.model_dump()))
            await self.db.commit()
        except Exception as e:
            if settings.debug:
                logger.exception(
                    "Garden insert failed", extra={"error_type": type(e).__name__}
                )
            else:
                logger.error("Garden insert failed", extra={"error_type": type(e).__name__})
            await self.db.rollback()
            raise PersistenceError("DB_001") from e

        logger.info(
            "Garden entry created",
            extra={"garden_id": str(entry.id), "user_id": str(user_id), "catalog_added": added},
        )
        return entry

    async def update_entry(self, entry_id: UUID, user_id: UUID, data: GardenUpdate) -> None:
        """
        Update the supplied fields of an entry owned by `user_id`.

        Raises:
            NotFoundError: If no row matches both the id and the owner
        """
        changes = data.model_dump(exclude_unset=True)
        affected = await self.garden_repo.update_owned(entry_id, user_id, changes)
        if affected == 0:
            raise NotFoundError("GARDEN_001")

    async def delete_entry(self, entry_id: UUID, user_id: UUID) -> None:
        """
        Delete an entry owned by `user_id`.

        Raises:
            NotFoundError: If no row matches both the id and the owner
        """
        affected = await self.garden_repo.delete_owned(entry_id, user_id)
        if affected == 0:
            raise NotFoundError("GARDEN_001")
        logger.info("Garden entry deleted", extra={"garden_id": str(entry_id)})
