"""Read-only plant reference tables."""
from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from botaniq.models.base import Base


class CleanedPlant(Base):
    """Curated plant dataset row (cleaned_plants)."""

    __tablename__ = "cleaned_plants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    latin: Mapped[str | None] = mapped_column(String(255), nullable=True)
    family: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    common_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    category: Mapped[str | None] = mapped_column(String(255), nullable=True)
    climate: Mapped[str | None] = mapped_column(String(255), nullable=True)
    ideal_light: Mapped[str | None] = mapped_column(String(255), nullable=True)
    watering: Mapped[str | None] = mapped_column(String(255), nullable=True)
    temp_max_celsius: Mapped[float | None] = mapped_column(Float, nullable=True)
    temp_min_celsius: Mapped[float | None] = mapped_column(Float, nullable=True)


class PlantFamily(Base):
    """Plant name to family lookup row (plantsandfamily)."""

    __tablename__ = "plantsandfamily"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    plant_name: Mapped[str] = mapped_column(String(255), nullable=False)
    family: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
