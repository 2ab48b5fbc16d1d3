"""Base repository with generic CRUD operations."""
from typing import Generic, Type, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from botaniq.models.base import BaseModel

T = TypeVar("T", bound=BaseModel)


class BaseRepository(Generic[T]):
    """Generic repository providing CRUD operations for any model.

    `add` only stages and flushes; committing is left to the caller so several
    writes can share one transaction. `create` is the single-statement
    shortcut that commits immediately.
    """

    def __init__(self, db: AsyncSession, model: Type[T]):
        self.db = db
        self.model = model

    async def get_by_id(self, id: UUID) -> T | None:
        """Get a single record by ID."""
        result = await self.db.execute(select(self.model).where(self.model.id == id))
        return result.scalar_one_or_none()

    async def get_all(self) -> list[T]:
        """Get every record, oldest first."""
        result = await self.db.execute(select(self.model).order_by(self.model.created_at))
        return list(result.scalars().all())

    async def add(self, obj: T) -> T:
        """Stage a new record and flush it so its ID is populated."""
        self.db.add(obj)
        await self.db.flush()
        return obj

    async def create(self, obj: T) -> T:
        """Create a new record in its own transaction."""
        self.db.add(obj)
        await self.db.commit()
        await self.db.refresh(obj)
        return obj

    async def update(self, id: UUID, data: dict) -> T | None:
        """Update a record by ID with provided data."""
        obj = await self.get_by_id(id)
        if not obj:
            return None

        for key, value in data.items():
            if hasattr(obj, key):
                setattr(obj, key, value)

        await self.db.commit()
        await self.db.refresh(obj)
        return obj
