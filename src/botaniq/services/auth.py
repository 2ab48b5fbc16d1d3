"""Authentication service with business logic."""

import logging

from sqlalchemy.exc import IntegrityError

from botaniq.core.exceptions import AuthenticationError, ConflictError
from botaniq.core.security import TokenCodec, hash_password, verify_password
from botaniq.models.user import User
from botaniq.repositories.user import UserRepository
from botaniq.schemas.auth import LoginResponse, PublicUser

logger = logging.getLogger(__name__)


class AuthService:
    """Service for authentication operations."""

    def __init__(self, user_repo: UserRepository, token_codec: TokenCodec):
        """
        Initialize authentication service.

        Args:
            user_repo: User repository for database operations
            token_codec: Signs the tokens issued at login
        """
        self.user_repo = user_repo
        self.token_codec = token_codec

    async def register(self, name: str, email: str, password: str) -> User:
        """
        Register a new user.

        Args:
            name: User's name
            email: User email address
            password: Plain text password, already checked against the policy

        Returns:
            Created user object

        Raises:
            ConflictError: If email already exists
        """
        # Fast path; the unique constraint on users.email is the real guard.
        if await self.user_repo.email_exists(email):
            raise ConflictError("USER_002")

        user = User(
            name=name,
            email=email,
            password_hash=hash_password(password),
        )

        try:
            created_user = await self.user_repo.create(user)
        except IntegrityError:
            # Lost a race against a concurrent registration for the same email.
            await self.user_repo.db.rollback()
            raise ConflictError("USER_002")

        logger.info("User registered", extra={"user_id": str(created_user.id)})
        return created_user

    async def login(self, email: str, password: str) -> LoginResponse:
        """
        Authenticate user and issue a bearer token.

        Raises:
            AuthenticationError: AUTH_001 for an unknown email, AUTH_002 for a
                wrong password
        """
        user = await self.user_repo.get_by_email(email)
        if user is None:
            raise AuthenticationError("AUTH_001")

        if not verify_password(password, user.password_hash):
            raise AuthenticationError("AUTH_002")

        token = self.token_codec.encode(user.id, user.name, user.email)
        return LoginResponse(token=token, user=PublicUser.model_validate(user))
