"""Authentication endpoints for user registration and login."""

from fastapi import APIRouter, Depends, status

from botaniq.api.deps import get_auth_service
from botaniq.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterResponse,
    UserRegister,
)
from botaniq.services.auth import AuthService

router = APIRouter(tags=["authentication"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register new user",
    description="Create a new user account with name, email and password.",
)
async def register(
    data: UserRegister,
    auth_service: AuthService = Depends(get_auth_service),
) -> RegisterResponse:
    """
    Register a new user account.

    Args:
        data: Registration data (name, email, password)
        auth_service: Authentication service

    Returns:
        Identifier of the new user

    Raises:
        400: Validation error (first violated rule is reported)
        409: Email already in use
    """
    user = await auth_service.register(
        name=data.name,
        email=data.email,
        password=data.password,
    )
    return RegisterResponse(user_id=user.id)


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="User login",
    description="Authenticate with email and password to receive a bearer token.",
)
async def login(
    data: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> LoginResponse:
    """
    Authenticate user and return a token plus the public user fields.

    Raises:
        401: Unknown email or wrong password
    """
    return await auth_service.login(email=data.email, password=data.password)
