"""User model for authentication and profile data."""
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from botaniq.models.base import BaseModel


class User(BaseModel):
    """User model representing registered accounts."""

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # Uniqueness is enforced here; the registration pre-check is only a fast path.
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(32), nullable=True)
    address: Mapped[str | None] = mapped_column(String(500), nullable=True)
    country: Mapped[str | None] = mapped_column(String(100), nullable=True)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    # Filename under the uploads directory, not a path or URL.
    avatar: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Relationships
    garden_entries: Mapped[list["GardenEntry"]] = relationship(
        "GardenEntry", back_populates="user", lazy="noload", passive_deletes="all"
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"
