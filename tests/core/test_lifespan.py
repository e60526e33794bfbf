"""Tests covering FastAPI lifespan wiring: schema creation, settings seeding and shutdown."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI

import main


class _AsyncContextManager:
    """Minimal async context manager stub."""

    def __init__(self, enter_result):
        self._enter_result = enter_result

    async def __aenter__(self):
        return self._enter_result

    async def __aexit__(self, exc_type, exc, tb):
        return False


@pytest.fixture
def lifespan_dependencies(monkeypatch):
    """Provide patched engine, session factory, seeding routine and redis shutdown."""

    conn = SimpleNamespace(run_sync=AsyncMock())
    begin_cm = _AsyncContextManager(conn)

    engine_mock = MagicMock()
    engine_mock.begin.return_value = begin_cm
    engine_mock.dispose = AsyncMock()
    monkeypatch.setattr(main, "engine", engine_mock)

    session = AsyncMock()
    session_ctx = _AsyncContextManager(session)
    session_factory = MagicMock(return_value=session_ctx)
    monkeypatch.setattr(main, "AsyncSessionLocal", session_factory)

    seed_mock = AsyncMock(return_value=3)
    monkeypatch.setattr(main, "seed_site_settings", seed_mock)

    close_redis_mock = AsyncMock()
    monkeypatch.setattr(main, "close_redis_client", close_redis_mock)

    return {
        "conn": conn,
        "engine": engine_mock,
        "session": session,
        "seed": seed_mock,
        "close_redis": close_redis_mock,
    }


@pytest.mark.asyncio
async def test_lifespan_creates_tables_and_seeds_settings(lifespan_dependencies):
    async with main.lifespan(FastAPI()):
        lifespan_dependencies["conn"].run_sync.assert_awaited_once()
        lifespan_dependencies["seed"].assert_awaited_once_with(lifespan_dependencies["session"])
        lifespan_dependencies["close_redis"].assert_not_awaited()


@pytest.mark.asyncio
async def test_lifespan_releases_resources_on_shutdown(lifespan_dependencies):
    async with main.lifespan(FastAPI()):
        pass

    lifespan_dependencies["close_redis"].assert_awaited_once()
    lifespan_dependencies["engine"].dispose.assert_awaited_once()


@pytest.mark.asyncio
async def test_lifespan_releases_resources_when_app_fails(lifespan_dependencies):
    with pytest.raises(RuntimeError):
        async with main.lifespan(FastAPI()):
            raise RuntimeError("boom")

    lifespan_dependencies["close_redis"].assert_awaited_once()
    lifespan_dependencies["engine"].dispose.assert_awaited_once()
