import logging
from typing import Optional

import redis.asyncio as redis
from redis.asyncio.connection import ConnectionPool

from app.api.core.config import settings

logger = logging.getLogger("app")

# Global Redis client instance
_redis_client: Optional[redis.Redis] = None
_connection_pool: Optional[ConnectionPool] = None


async def get_redis_client() -> redis.Redis:
    """
    Get or create Redis client instance.

    Returns:
        Redis client instance

    Raises:
        ValueError: If REDIS_URL is not configured
    """
    global _redis_client, _connection_pool
    if _redis_client is None:
        if not settings.REDIS_URL:
            raise ValueError(
                "REDIS_URL is not configured. Please set REDIS_URL in your .env file "
                "with a valid Redis URL (e.g., redis://localhost:6379/0)"
            )

        _connection_pool = ConnectionPool.from_url(
            settings.REDIS_URL,
            encoding="utf-8",
            decode_responses=True,
            max_connections=50,
            socket_connect_timeout=5,
            socket_timeout=10,
            socket_keepalive=True,
            retry_on_timeout=True,
            health_check_interval=30,
        )

        _redis_client = redis.Redis(connection_pool=_connection_pool)
        logger.info(f"Redis client initialized with URL: {settings.REDIS_URL}")
    return _redis_client


async def close_redis_client():
    """Close the Redis client connection and pool."""
    global _redis_client, _connection_pool
    if _redis_client:
        await _redis_client.close()
        _redis_client = None
    if _connection_pool:
        await _connection_pool.disconnect()
        _connection_pool = None
        logger.info("Redis client and connection pool closed")


# ==================== JWT DENYLIST ====================


async def add_token_to_denylist(jti: str, ttl: int) -> bool:
    """
    Add a JWT ID (jti) to the denylist in Redis.
    Used during admin logout to revoke tokens.

    Args:
        jti: JWT ID to denylist
        ttl: Time-to-live in seconds (should match token expiry)

    Returns:
        True if successful
    """
    try:
        client = await get_redis_client()
        key = f"jwt:denylist:{jti}"
        await client.setex(key, ttl, "revoked")
        logger.info(f"Added JWT {jti} to denylist with TTL {ttl}s")
        return True
    except Exception as e:
        logger.error(f"Failed to add JWT to denylist: {str(e)}")
        return False


async def is_token_denylisted(jti: str) -> bool:
    """
    Check if a JWT ID is in the denylist.

    Args:
        jti: JWT ID to check

    Returns:
        True if token is denylisted (revoked)
    """
    try:
        client = await get_redis_client()
        key = f"jwt:denylist:{jti}"
        exists = await client.exists(key)
        return bool(exists)
    except Exception as e:
        logger.error(f"Failed to check JWT denylist: {str(e)}")
        # Fail secure: if Redis is down, deny access
        return True


# ==================== RATE LIMITING ====================


async def check_rate_limit(
    identifier: str, max_attempts: int = 5, window_seconds: int = 60
) -> bool:
    """
    Check if identifier (IP or username) has exceeded rate limit.
    Used for admin login throttling and email capture throttling.

    Args:
        identifier: Namespaced key such as ``login:<username>`` or ``capture:<ip>``
        max_attempts: Maximum attempts allowed in window
        window_seconds: Time window in seconds

    Returns:
        True if rate limit NOT exceeded (request allowed)
        False if rate limit exceeded (request blocked)
    """
    try:
        client = await get_redis_client()
        key = f"rate_limit:{identifier}"

        current = await client.incr(key)

        # Set expiry on first attempt
        if current == 1:
            await client.expire(key, window_seconds)

        if current > max_attempts:
            logger.warning(f"Rate limit exceeded for {identifier}: {current}/{max_attempts}")
            return False

        return True
    except Exception as e:
        logger.error(f"Rate limit check failed: {str(e)}")
        # Fail open: if Redis is down, allow request
        return True


async def reset_rate_limit(identifier: str) -> bool:
    """
    Reset rate limit for identifier (e.g., after successful login).

    Args:
        identifier: Namespaced key to reset

    Returns:
        True if successful
    """
    try:
        client = await get_redis_client()
        key = f"rate_limit:{identifier}"
        await client.delete(key)
        logger.info(f"Reset rate limit for {identifier}")
        return True
    except Exception as e:
        logger.error(f"Failed to reset rate limit: {str(e)}")
        return False
