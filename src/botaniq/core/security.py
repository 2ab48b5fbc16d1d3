"""Security utilities for password hashing and JWT token management."""

from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID

from jose import JWTError, jwt
from passlib.context import CryptContext

# Password hashing with Argon2
pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")

PRINCIPAL_CLAIMS = ("id", "name", "email")


def hash_password(password: str) -> str:
    """
    Hash a password using Argon2.

    Args:
        password: Plain text password

    Returns:
        Hashed password string
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a password against its hash.

    Args:
        plain_password: Password to verify
        hashed_password: Stored password hash

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain_password, hashed_password)


class TokenCodec:
    """Signs and verifies the bearer tokens handed out at login."""

    def __init__(self, secret: str, algorithm: str = "HS256", expire_minutes: int = 0):
        if not secret:
            raise ValueError("JWT secret must not be empty")
        self.secret = secret
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def encode(self, user_id: UUID, name: str, email: str) -> str:
        """
        Create a signed token carrying the principal claims.

        Args:
            user_id: User ID
            name: User's display name
            email: User email address

        Returns:
            Encoded JWT token string
        """
        now = datetime.now(timezone.utc)
        to_encode: dict[str, Any] = {
            "id": str(user_id),
            "name": name,
            "email": email,
            "iat": now,
        }
        if self.expire_minutes > 0:
            to_encode["exp"] = now + timedelta(minutes=self.expire_minutes)
        return jwt.encode(to_encode, self.secret, algorithm=self.algorithm)

    def decode(self, token: str) -> dict[str, Any]:
        """
        Decode and verify a JWT token.

        Raises:
            JWTError: If the token is malformed, forged, expired, or lacks
                one of the principal claims
        """
        payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        missing = [claim for claim in PRINCIPAL_CLAIMS if claim not in payload]
        if missing:
            raise JWTError(f"Token missing claims: {', '.join(missing)}")
        return payload
