"""Read-only repositories for the plant reference tables."""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from botaniq.models.plant import CleanedPlant, PlantFamily


class PlantRepository:
    """Queries over cleaned_plants and plantsandfamily."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_all_plants(self) -> list[CleanedPlant]:
        result = await self.db.execute(select(CleanedPlant).order_by(CleanedPlant.id))
        return list(result.scalars().all())

    async def get_all_families(self) -> list[PlantFamily]:
        result = await self.db.execute(select(PlantFamily).order_by(PlantFamily.id))
        return list(result.scalars().all())
