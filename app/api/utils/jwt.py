import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt as pyjwt

from app.api.core.config import settings

logger = logging.getLogger("app")


def create_access_token(
    admin_id: str,
    role: str,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Create a JWT access token for an administrator.

    Args:
        admin_id: UUID of the administrator
        role: Role name carried in the token
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT token string
    """
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(hours=settings.JWT_EXPIRY_HOURS)

    # Generate unique JWT ID for revocation tracking
    jti = str(uuid.uuid4())

    payload = {
        "sub": str(admin_id),
        "role": role,
        "exp": expire,
        "iat": datetime.now(timezone.utc),
        "jti": jti,
    }

    encoded_jwt = pyjwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)
    logger.info(f"Created JWT for admin {admin_id}, jti: {jti}")
    return encoded_jwt


def decode_token(token: str) -> Dict[str, Any]:
    """
    Decode and verify a JWT token.

    Args:
        token: JWT token string

    Returns:
        Decoded token payload

    Raises:
        jwt.ExpiredSignatureError: If token has expired
        jwt.InvalidTokenError: If token is invalid
    """
    try:
        return pyjwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except pyjwt.PyJWTError as e:
        logger.warning(f"Invalid or expired JWT token: {str(e)}")
        raise


def calculate_token_ttl(payload: Dict[str, Any]) -> int:
    """
    Calculate remaining time-to-live for a decoded token in seconds.
    Used to set Redis TTL when denylisting tokens.

    Args:
        payload: Decoded JWT payload

    Returns:
        TTL in seconds, or the configured token lifetime if ``exp`` is missing
    """
    exp = payload.get("exp")
    if exp:
        ttl = exp - datetime.now(timezone.utc).timestamp()
        return max(int(ttl), 0)
    return settings.JWT_EXPIRY_HOURS * 3600
