import logging
from typing import Optional

import bcrypt

from app.api.core.config import settings

logger = logging.getLogger("app")

# bcrypt only looks at the first 72 bytes of its input.
MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """
    Hash an administrator password with bcrypt.

    Args:
        password: Plain text password
        rounds: Work factor; defaults to ``settings.BCRYPT_ROUNDS``

    Raises:
        ValueError: The password is longer than bcrypt can hash faithfully
    """
    encoded = password.encode("utf-8")
    if len(encoded) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(encoded, salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    encoded = plain_password.encode("utf-8")
    if len(encoded) > MAX_PASSWORD_BYTES:
        return False
    try:
        return bcrypt.checkpw(encoded, hashed_password.encode("utf-8"))
    except ValueError as e:
        logger.error(f"Stored password hash is unusable: {str(e)}")
        return False


def needs_rehash(hashed_password: str) -> bool:
    """True when a stored hash was made with a different work factor than configured."""
    parts = hashed_password.split("$")
    if len(parts) < 4 or not parts[2].isdigit():
        return True
    return int(parts[2]) != settings.BCRYPT_ROUNDS
