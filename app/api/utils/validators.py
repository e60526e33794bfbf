import re
import uuid
from typing import Optional


def parse_uuid(raw_id) -> Optional[uuid.UUID]:
    """Return ``raw_id`` as a UUID, or None if it cannot be one.

    Path and token identifiers come in as strings; a malformed one is treated
    as an identifier that resolves to nothing rather than a validation error.
    """
    if isinstance(raw_id, uuid.UUID):
        return raw_id
    try:
        return uuid.UUID(str(raw_id))
    except (TypeError, ValueError):
        return None


def is_strong_password(password: str) -> str:
    """Check password strength and return a human-readable error message.

    Used when an administrator account is created or reset. If the password
    satisfies all checks, an empty string is returned.

    Args:
        password: The plaintext password to validate.

    Returns:
        An empty string on success, or a message describing the failures.
    """
    errors: list[str] = []

    # Minimum length
    if len(password) < 8:
        errors.append("at least 8 characters")
    if not re.search(r"[A-Z]", password):
        errors.append("one uppercase letter")
    if not re.search(r"[a-z]", password):
        errors.append("one lowercase letter")
    if not re.search(r"[0-9]", password):
        errors.append("one digit")

    if errors:
        return "Password must contain: " + ", ".join(errors) + "."
    return ""
