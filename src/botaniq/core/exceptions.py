"""Exception hierarchy for the API.

Each exception carries an error_code from the catalog in errors.py and the
HTTP status it is reported with. Services raise these; the global handler in
api/middleware/error_handler.py turns them into JSON responses.
"""

from typing import Any


class BotaniqError(Exception):
    """Base exception for all application errors.

    Attributes:
        error_code: Code from the error catalog (e.g., "AUTH_001")
        message: Optional response message overriding the catalog message
        details: Additional context about the error (for logs only)
        http_status: HTTP status code to return
    """

    http_status: int = 500

    def __init__(
        self,
        error_code: str,
        message: str | None = None,
        details: dict[str, Any] | None = None,
        http_status: int | None = None,
    ):
        self.error_code = error_code
        self.message = message
        self.details = details or {}
        if http_status is not None:
            self.http_status = http_status
        super().__init__(message or error_code)


class ValidationError(BotaniqError):
    """Malformed or missing input (VAL_001)."""

    http_status = 400


class AuthenticationError(BotaniqError):
    """Bad credentials, or a missing or invalid bearer token.

    - Unknown email (AUTH_001)
    - Wrong password (AUTH_002)
    - Missing, malformed, forged or expired token (AUTH_003)
    """

    http_status = 401


class NotFoundError(BotaniqError):
    """Entity absent or not owned by the requester."""

    http_status = 404


class ConflictError(BotaniqError):
    """Duplicate value for a unique field (USER_002, DB_002)."""

    http_status = 409


class PayloadTooLargeError(BotaniqError):
    """Uploaded file exceeds the configured limit (UPLOAD_001)."""

    http_status = 413


class PersistenceError(BotaniqError):
    """A database unit of work failed and was rolled back (DB_001)."""

    pass
