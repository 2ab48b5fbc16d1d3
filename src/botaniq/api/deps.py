"""FastAPI dependency injection for authentication, services and database."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from botaniq.config import settings
from botaniq.core.exceptions import AuthenticationError
from botaniq.core.security import TokenCodec
from botaniq.db.session import get_db
from botaniq.repositories.garden import GardenRepository
from botaniq.repositories.plant import PlantRepository
from botaniq.repositories.recommendation import RecommendationRepository
from botaniq.repositories.user import UserRepository
from botaniq.schemas.auth import Principal
from botaniq.services.auth import AuthService
from botaniq.services.avatar_storage import AvatarStorage
from botaniq.services.catalog import CatalogService
from botaniq.services.garden import GardenService
from botaniq.services.profile import ProfileService

# Missing credentials must surface as 401, not FastAPI's default 403.
security = HTTPBearer(auto_error=False)


@lru_cache
def get_token_codec() -> TokenCodec:
    """Token codec configured from settings, built once."""
    return TokenCodec(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expire_minutes=settings.jwt_expire_minutes,
    )


def get_avatar_storage() -> AvatarStorage:
    return AvatarStorage(settings.upload_path, settings.upload_max_bytes)


async def get_user_repository(
    db: AsyncSession = Depends(get_db),
) -> UserRepository:
    return UserRepository(db)


async def get_auth_service(
    user_repo: UserRepository = Depends(get_user_repository),
    token_codec: TokenCodec = Depends(get_token_codec),
) -> AuthService:
    """
    Get authentication service instance.

    Args:
        user_repo: User repository
        token_codec: Configured token codec

    Returns:
        AuthService instance
    """
    return AuthService(user_repo, token_codec)


async def get_profile_service(
    user_repo: UserRepository = Depends(get_user_repository),
    storage: AvatarStorage = Depends(get_avatar_storage),
) -> ProfileService:
    return ProfileService(user_repo, storage)


async def get_catalog_service(
    db: AsyncSession = Depends(get_db),
) -> CatalogService:
    return CatalogService(RecommendationRepository(db), GardenRepository(db))


async def get_garden_service(
    db: AsyncSession = Depends(get_db),
) -> GardenService:
    return GardenService(GardenRepository(db), RecommendationRepository(db))


async def get_plant_repository(
    db: AsyncSession = Depends(get_db),
) -> PlantRepository:
    return PlantRepository(db)


async def get_current_principal(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    token_codec: TokenCodec = Depends(get_token_codec),
) -> Principal:
    """
    Resolve the caller from the bearer token.

    The principal comes from the verified claims alone; it is not looked up
    in the users table.

    Raises:
        AuthenticationError: If the token is missing, malformed, forged or
            expired
    """
    if credentials is None:
        raise AuthenticationError("AUTH_003")

    try:
        claims = token_codec.decode(credentials.credentials)
        principal = Principal.from_claims(claims)
    except (JWTError, PydanticValidationError):
        raise AuthenticationError("AUTH_003")

    # Picked up by the request logging middleware.
    request.state.user = principal
    return principal
