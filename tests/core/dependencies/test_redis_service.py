from unittest.mock import AsyncMock, patch

import pytest

from app.api.core.dependencies import redis_service
from app.api.core.dependencies.redis_service import (
    add_token_to_denylist,
    check_rate_limit,
    close_redis_client,
    get_redis_client,
    is_token_denylisted,
    reset_rate_limit,
)


@pytest.mark.asyncio
async def test_get_redis_client_is_cached(mock_redis):
    first = await get_redis_client()
    second = await get_redis_client()
    assert first is second is mock_redis


@pytest.mark.asyncio
async def test_get_redis_client_requires_url(monkeypatch):
    monkeypatch.setattr(redis_service.settings, "REDIS_URL", "")
    with pytest.raises(ValueError):
        await get_redis_client()


@pytest.mark.asyncio
async def test_close_redis_client_resets_globals(mock_redis):
    await get_redis_client()
    await close_redis_client()

    mock_redis.close.assert_awaited_once()
    assert redis_service._redis_client is None
    assert redis_service._connection_pool is None


@pytest.mark.asyncio
async def test_rate_limit_allows_up_to_max_attempts(mock_redis):
    results = [await check_rate_limit("capture:1.2.3.4", max_attempts=3) for _ in range(4)]
    assert results == [True, True, True, False]
    mock_redis.expire.assert_awaited_once_with("rate_limit:capture:1.2.3.4", 60)


@pytest.mark.asyncio
async def test_rate_limit_keys_are_independent(mock_redis):
    assert await check_rate_limit("login:alice", max_attempts=1) is True
    assert await check_rate_limit("login:alice", max_attempts=1) is False
    assert await check_rate_limit("login:bob", max_attempts=1) is True


@pytest.mark.asyncio
async def test_reset_rate_limit_clears_counter(mock_redis):
    await check_rate_limit("login:alice", max_attempts=1)
    assert await reset_rate_limit("login:alice") is True
    assert await check_rate_limit("login:alice", max_attempts=1) is True


@pytest.mark.asyncio
async def test_rate_limit_fails_open_when_redis_is_down():
    with patch.object(
        redis_service, "get_redis_client", AsyncMock(side_effect=ConnectionError("down"))
    ):
        assert await check_rate_limit("capture:1.2.3.4", max_attempts=0) is True


@pytest.mark.asyncio
async def test_denylist_roundtrip(mock_redis):
    assert await is_token_denylisted("jti-1") is False
    assert await add_token_to_denylist("jti-1", 60) is True
    assert await is_token_denylisted("jti-1") is True
    mock_redis.setex.assert_awaited_once_with("jwt:denylist:jti-1", 60, "revoked")


@pytest.mark.asyncio
async def test_denylist_fails_secure_when_redis_is_down():
    with patch.object(
        redis_service, "get_redis_client", AsyncMock(side_effect=ConnectionError("down"))
    ):
        assert await is_token_denylisted("jti-1") is True
        assert await add_token_to_denylist("jti-1", 60) is False
