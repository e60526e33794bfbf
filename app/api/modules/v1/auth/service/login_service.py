import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from app.api.core.config import settings
from app.api.core.dependencies.redis_service import (
    add_token_to_denylist,
    check_rate_limit,
    reset_rate_limit,
)
from app.api.core.exceptions import AuthError, RateLimitExceeded
from app.api.modules.v1.users.models.users_model import AdminUser
from app.api.utils.jwt import calculate_token_ttl, create_access_token
from app.api.utils.password import hash_password, needs_rehash, verify_password

logger = logging.getLogger("app")

INVALID_CREDENTIALS_MESSAGE = "Invalid username or password."


class LoginService:
    """
    Administrator authentication:
    - Per-username rate limiting
    - bcrypt password verification
    - JWT issuance and revocation
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def login(self, username: str, password: str, ip_address: Optional[str] = None) -> dict:
        """
        Authenticate an administrator and issue an access token.

        Unknown usernames, wrong passwords and inactive accounts all fail the
        same way so the response never reveals which one it was.

        Args:
            username: Administrator username
            password: Plain text password
            ip_address: Client IP, for logging only

        Returns:
            Dictionary with token, token_type and expires_in

        Raises:
            RateLimitExceeded: Too many attempts for this username in the window
            AuthError: Credentials rejected
        """
        rate_key = f"login:{username.lower()}"
        allowed = await check_rate_limit(
            rate_key,
            max_attempts=settings.LOGIN_MAX_ATTEMPTS,
            window_seconds=settings.LOGIN_ATTEMPT_WINDOW_SECONDS,
        )
        if not allowed:
            logger.warning(f"Login blocked for {username} from {ip_address}: too many attempts")
            raise RateLimitExceeded(
                retry_after=settings.LOGIN_ATTEMPT_WINDOW_SECONDS,
                message="Too many login attempts. Please try again later.",
            )

        user = await self.db.scalar(select(AdminUser).where(AdminUser.username == username))

        if not user or not verify_password(password, user.password_hash):
            logger.warning(f"Login failed for username {username} from {ip_address}")
            raise AuthError(INVALID_CREDENTIALS_MESSAGE)

        if not user.is_active:
            logger.warning(f"Login blocked: inactive account {username}")
            raise AuthError(INVALID_CREDENTIALS_MESSAGE)

        if needs_rehash(user.password_hash):
            user.password_hash = hash_password(password)
            logger.info(f"Rehashed password for {username} with the configured work factor")

        user.last_login = datetime.now(timezone.utc)
        self.db.add(user)
        await self.db.commit()

        await reset_rate_limit(rate_key)

        token = create_access_token(admin_id=str(user.id), role=user.role)
        logger.info(f"Admin {username} logged in from {ip_address}")

        return {
            "token": token,
            "token_type": "bearer",
            "expires_in": settings.JWT_EXPIRY_HOURS * 3600,
        }


async def logout_admin(payload: dict) -> bool:
    """
    Revoke a decoded token by adding its jti to the Redis denylist.

    Args:
        payload: Decoded JWT payload of the token being revoked

    Returns:
        True if logout successful
    """
    jti = payload.get("jti")
    if not jti:
        logger.error("Failed to extract jti from token during logout")
        return False

    ttl = max(calculate_token_ttl(payload), 1)
    success = await add_token_to_denylist(jti, ttl)

    if success:
        logger.info(f"Token {jti} denylisted successfully")
    else:
        logger.error(f"Failed to denylist token {jti} during logout")
    return success
