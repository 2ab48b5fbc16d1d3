"""Per-user garden management model (manajemen_kebun)."""
from uuid import UUID

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from botaniq.models.base import BaseModel


class GardenEntry(BaseModel):
    """A plant tracked in one user's garden."""

    __tablename__ = "manajemen_kebun"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    plant_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    growth: Mapped[str | None] = mapped_column(String(100), nullable=True)
    soil: Mapped[str | None] = mapped_column(String(255), nullable=True)
    sunlight: Mapped[str | None] = mapped_column(String(255), nullable=True)
    watering: Mapped[str | None] = mapped_column(String(255), nullable=True)
    fertilization_type: Mapped[str | None] = mapped_column(String(255), nullable=True)
    family: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="garden_entries")

    def __repr__(self) -> str:
        return f"<GardenEntry(id={self.id}, user_id={self.user_id}, family={self.family})>"
