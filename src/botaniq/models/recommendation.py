"""Plant catalog model (rekomendasi_tanaman)."""
from sqlalchemy import Float, String
from sqlalchemy.orm import Mapped, mapped_column

from botaniq.models.base import BaseModel


class Recommendation(BaseModel):
    """Global plant catalog entry.

    `family` is a loose join key to garden entries; it is neither unique nor
    a foreign key.
    """

    __tablename__ = "rekomendasi_tanaman"

    latin: Mapped[str | None] = mapped_column(String(255), nullable=True)
    family: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    category: Mapped[str | None] = mapped_column(String(255), nullable=True)
    climate: Mapped[str | None] = mapped_column(String(255), nullable=True)
    ideal_light: Mapped[str | None] = mapped_column(String(255), nullable=True)
    tolerated_light: Mapped[str | None] = mapped_column(String(255), nullable=True)
    watering: Mapped[str | None] = mapped_column(String(255), nullable=True)
    insects: Mapped[str | None] = mapped_column(String(500), nullable=True)
    plant_use: Mapped[str | None] = mapped_column(String(500), nullable=True)
    temp_max_celsius: Mapped[float | None] = mapped_column(Float, nullable=True)
    temp_min_celsius: Mapped[float | None] = mapped_column(Float, nullable=True)

    def __repr__(self) -> str:
        return f"<Recommendation(id={self.id}, family={self.family}, latin={self.latin})>"
