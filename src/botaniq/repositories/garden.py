"""Garden management repository with owner-scoped mutations."""
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from botaniq.models.garden import GardenEntry
from botaniq.repositories.base import BaseRepository


class GardenRepository(BaseRepository[GardenEntry]):
    """Repository for GardenEntry.

    Update and delete put the owner in the WHERE clause instead of reading
    the row first, so "missing" and "not yours" both affect zero rows.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(db, GardenEntry)

    async def get_all_by_user(self, user_id: UUID) -> list[GardenEntry]:
        """Get all garden entries owned by a user."""
        result = await self.db.execute(
            select(GardenEntry)
            .where(GardenEntry.user_id == user_id)
            .order_by(GardenEntry.created_at)
        )
        return list(result.scalars().all())

    async def update_owned(self, entry_id: UUID, user_id: UUID, data: dict) -> int:
        """Update an entry owned by `user_id`.

        Returns:
            Number of affected rows (0 or 1)
        """
        values = {**data, "updated_at": datetime.now(timezone.utc)}
        result = await self.db.execute(
            update(GardenEntry)
            .where(GardenEntry.id == entry_id, GardenEntry.user_id == user_id)
            .values(**values)
        )
        await self.db.commit()
        return result.rowcount

    async def delete_owned(self, entry_id: UUID, user_id: UUID) -> int:
        """Delete an entry owned by `user_id`.

        Returns:
            Number of affected rows (0 or 1)
        """
        result = await self.db.execute(
            delete(GardenEntry)
            .where(GardenEntry.id == entry_id, GardenEntry.user_id == user_id)
        )
        await self.db.commit()
        return result.rowcount
