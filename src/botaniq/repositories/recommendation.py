"""Plant catalog repository."""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from botaniq.models.recommendation import Recommendation
from botaniq.repositories.base import BaseRepository


class RecommendationRepository(BaseRepository[Recommendation]):
    """Repository for the global plant catalog."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Recommendation)

    async def get_by_family(self, family: str) -> Recommendation | None:
        """Return the first catalog row for a family, if any."""
        result = await self.db.execute(
            select(Recommendation)
            .where(Recommendation.family == family)
            .order_by(Recommendation.created_at)
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def add_family_if_absent(self, family: str) -> bool:
        """Stage a bare catalog row for `family` unless one already exists.

        Returns:
            True if a row was added, False if the family was already present
        """
        if await self.get_by_family(family) is not None:
            return False
        await self.add(Recommendation(family=family))
        return True
