"""Error codes and user-facing messages.

Every error the API reports maps to one entry here:
- code: Unique identifier
- message: Technical description (default response message)
- user_message: User-friendly explanation
- suggestion: Actionable guidance for the user
- retry_allowed: Whether the request may be retried as-is
"""

ERROR_CATALOG: dict[str, dict] = {
    "VAL_001": {
        "code": "VAL_001",
        "message": "Request validation failed",
        "user_message": "Invalid input data.",
        "suggestion": "Please check your input and try again.",
        "retry_allowed": True,
    },
    "AUTH_001": {
        "code": "AUTH_001",
        "message": "Email not found",
        "user_message": "No account is registered with this email.",
        "suggestion": "Check the email address or register a new account.",
        "retry_allowed": True,
    },
    "AUTH_002": {
        "code": "AUTH_002",
        "message": "Wrong password",
        "user_message": "The password you entered is incorrect.",
        "suggestion": "Check your password and try again.",
        "retry_allowed": True,
    },
    "AUTH_003": {
        "code": "AUTH_003",
        "message": "Could not validate credentials",
        "user_message": "Your session is missing or invalid.",
        "suggestion": "Please log in again.",
        "retry_allowed": False,
    },
    "USER_001": {
        "code": "USER_001",
        "message": "User not found",
        "user_message": "We couldn't find this user.",
        "suggestion": "Please log in again.",
        "retry_allowed": False,
    },
    "USER_002": {
        "code": "USER_002",
        "message": "Email already in use",
        "user_message": "An account with this email already exists.",
        "suggestion": "Log in instead, or register with a different email.",
        "retry_allowed": False,
    },
    "GARDEN_001": {
        "code": "GARDEN_001",
        "message": "Data not found or access denied",
        "user_message": "We couldn't find this garden entry.",
        "suggestion": "Refresh your garden list and try again.",
        "retry_allowed": False,
    },
    "UPLOAD_001": {
        "code": "UPLOAD_001",
        "message": "Upload exceeds maximum size",
        "user_message": "The file is too large. Maximum file size is 10 MB.",
        "suggestion": "Please upload a smaller image.",
        "retry_allowed": False,
    },
    "DB_001": {
        "code": "DB_001",
        "message": "Failed to save data",
        "user_message": "We couldn't save your changes due to a database error.",
        "suggestion": "Please try again in a few moments.",
        "retry_allowed": True,
    },
    "DB_002": {
        "code": "DB_002",
        "message": "Resource already exists",
        "user_message": "This record already exists.",
        "suggestion": "Please check if the record was already created.",
        "retry_allowed": False,
    },
    "SYS_001": {
        "code": "SYS_001",
        "message": "Internal server error",
        "user_message": "An unexpected error occurred.",
        "suggestion": "Please try again later or contact support.",
        "retry_allowed": True,
    },
}


def get_error(error_code: str) -> dict:
    """Get error definition by code.

    Unknown codes resolve to a generic definition instead of raising.
    """
    if error_code not in ERROR_CATALOG:
        return {
            "code": "UNKNOWN",
            "message": f"Unknown error code: {error_code}",
            "user_message": "An unexpected error occurred.",
            "suggestion": "Please try again. Contact support if the problem persists.",
            "retry_allowed": True,
        }
    return ERROR_CATALOG[error_code]
