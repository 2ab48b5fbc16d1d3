"""Password strength rules applied at registration."""

import re

PASSWORD_MIN_LENGTH = 8
PASSWORD_SYMBOLS = "!@#$%^&*()_+}{\":;'?/\\><,"

# Checked in order; the first failing rule is the one reported.
PASSWORD_RULES: list[tuple[str, re.Pattern, bool]] = [
    ("Password must not contain whitespace.", re.compile(r"\s"), False),
    ("Password must contain at least one digit.", re.compile(r"\d"), True),
    ("Password must contain at least one lowercase letter.", re.compile(r"[a-z]"), True),
    ("Password must contain at least one uppercase letter.", re.compile(r"[A-Z]"), True),
    (
        f"Password must contain at least one symbol ({PASSWORD_SYMBOLS}).",
        re.compile("[" + re.escape(PASSWORD_SYMBOLS) + "]"),
        True,
    ),
]


def password_violation(password: str) -> str | None:
    """Return the message of the first rule the password breaks, or None.

    Args:
        password: Candidate plain text password

    Returns:
        Violation message, or None when the password satisfies every rule
    """
    if len(password) < PASSWORD_MIN_LENGTH:
        return f"Password must be at least {PASSWORD_MIN_LENGTH} characters long."

    for message, pattern, must_match in PASSWORD_RULES:
        if bool(pattern.search(password)) != must_match:
            return message
    return None
