"""Pydantic schemas for authentication endpoints."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic_core import PydanticCustomError

from botaniq.core.password_policy import password_violation


class UserRegister(BaseModel):
    """Request model for user registration."""

    name: str = Field(..., min_length=1, max_length=255, description="User's name")
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., description="Password (see password policy)")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise PydanticCustomError("name_blank", "Name is required.")
        return value

    @field_validator("password")
    @classmethod
    def password_strength(cls, value: str) -> str:
        violation = password_violation(value)
        if violation:
            raise PydanticCustomError("password_policy", violation)
        return value


class RegisterResponse(BaseModel):
    """Response model for a successful registration."""

    model_config = ConfigDict(populate_by_name=True)

    status: str = "success"
    message: str = "Registration successful"
    user_id: UUID = Field(..., alias="userId")


class LoginRequest(BaseModel):
    """Request model for user login."""

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


class PublicUser(BaseModel):
    """Public subset of a user record returned at login."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    email: str


class LoginResponse(BaseModel):
    """Response model for a successful login."""

    message: str = "Login successful"
    token: str = Field(..., description="Bearer token carrying id, name and email")
    user: PublicUser


class Principal(BaseModel):
    """Authenticated caller, rebuilt from verified token claims on every request."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    email: str

    @classmethod
    def from_claims(cls, claims: dict[str, Any]) -> "Principal":
        return cls(id=claims["id"], name=claims["name"], email=claims["email"])
