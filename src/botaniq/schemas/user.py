"""Pydantic schemas for profile endpoints."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class ProfileData(BaseModel):
    """Public profile fields."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    last_name: str | None = None
    email: str
    phone: str | None = None
    address: str | None = None
    avatar: str | None = None
    country: str | None = None
    city: str | None = None
    created_at: datetime
    updated_at: datetime


class ProfileResponse(BaseModel):
    status: str = "success"
    data: ProfileData


class MessageResponse(BaseModel):
    """Generic acknowledgement for updates and deletes."""

    status: str = "success"
    message: str


class ProfileUpdate(BaseModel):
    """Partial profile edit; None means "keep the stored value"."""

    name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    address: str | None = None
    country: str | None = None
    city: str | None = None
