import logging
from typing import Optional

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from app.api.core.dependencies.redis_service import is_token_denylisted
from app.api.core.exceptions import AuthError
from app.api.db.database import get_db
from app.api.modules.v1.users.models.users_model import AdminUser
from app.api.utils.jwt import decode_token
from app.api.utils.validators import parse_uuid

logger = logging.getLogger("app")

# HTTP Bearer token extraction; a missing header is reported through AuthError
security = HTTPBearer(auto_error=False)

UNAUTHORIZED = "UNAUTHORIZED"


async def get_token_payload(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> dict:
    """
    Extract and validate the bearer JWT, return its decoded payload.
    Enforces:
    - Token present
    - Valid JWT signature
    - Token not expired
    - Token not in denylist (logged out)

    Raises:
        AuthError: 401 UNAUTHORIZED if any check fails
    """
    if credentials is None or not credentials.credentials:
        raise AuthError("Authentication required.", code=UNAUTHORIZED)

    try:
        payload = decode_token(credentials.credentials)
    except jwt.ExpiredSignatureError:
        raise AuthError("Token has expired.", code=UNAUTHORIZED)
    except jwt.InvalidTokenError:
        raise AuthError("Invalid token.", code=UNAUTHORIZED)

    jti = payload.get("jti")
    if not payload.get("sub") or not jti:
        raise AuthError("Invalid token payload.", code=UNAUTHORIZED)

    if await is_token_denylisted(jti):
        logger.warning(f"Attempted use of denylisted token: {jti}")
        raise AuthError("Token has been revoked.", code=UNAUTHORIZED)

    return payload


async def get_current_admin(
    payload: dict = Depends(get_token_payload),
    db: AsyncSession = Depends(get_db),
) -> AdminUser:
    """
    Resolve the administrator a valid token was issued to.

    Raises:
        AuthError: 401 UNAUTHORIZED if the account no longer exists or is inactive
    """
    admin_id = parse_uuid(payload.get("sub"))
    admin = await db.scalar(select(AdminUser).where(AdminUser.id == admin_id)) if admin_id else None

    if not admin or not admin.is_active:
        logger.warning(f"Token subject {payload.get('sub')} is not an active administrator")
        raise AuthError("Administrator account not found or inactive.", code=UNAUTHORIZED)

    return admin
