from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from app.api import router as api_router
from app.api.core.config import settings
from app.api.core.exceptions import register_exception_handlers
from app.api.db.database import build_engine, get_db, make_session_factory

# Import all models to ensure they are registered with SQLAlchemy before creating tables
from app.api.modules.v1.site_config.models import SiteContent, SiteSetting  # noqa: F401
from app.api.modules.v1.users.models.users_model import AdminUser
from app.api.modules.v1.waitlist.models import WaitlistEntry  # noqa: F401
from app.api.utils.jwt import create_access_token
from app.api.utils.password import hash_password

TEST_DATABASE_URL = "sqlite+aiosqlite://"

ADMIN_PASSWORD = "Sup3rSecret"


@pytest.fixture(autouse=True, scope="function")
def mock_redis(monkeypatch):
    """
    Mock Redis client for all tests to avoid connection errors.
    This fixture is autouse=True so it applies to all tests automatically.
    """
    monkeypatch.setattr(settings, "REDIS_URL", "redis://localhost:6379/0")

    # Create a simple in-memory store to simulate Redis behavior
    redis_store = {}

    mock_redis_client = AsyncMock()

    async def mock_get(key):
        return redis_store.get(key)

    async def mock_setex(key, seconds, value):
        redis_store[key] = str(value)
        return True

    async def mock_delete(*keys):
        count = 0
        for key in keys:
            if key in redis_store:
                del redis_store[key]
                count += 1
        return count

    async def mock_incr(key):
        current = int(redis_store.get(key, 0))
        new_value = current + 1
        redis_store[key] = str(new_value)
        return new_value

    async def mock_expire(key, seconds):
        return True

    async def mock_exists(key):
        return 1 if key in redis_store else 0

    mock_redis_client.get.side_effect = mock_get
    mock_redis_client.setex.side_effect = mock_setex
    mock_redis_client.delete.side_effect = mock_delete
    mock_redis_client.incr.side_effect = mock_incr
    mock_redis_client.expire.side_effect = mock_expire
    mock_redis_client.exists.side_effect = mock_exists
    mock_redis_client.close.return_value = None
    mock_redis_client.store = redis_store

    mock_pool = MagicMock()
    mock_pool.disconnect = AsyncMock()

    with (
        patch("redis.asyncio.connection.ConnectionPool.from_url", return_value=mock_pool),
        patch("redis.asyncio.Redis", return_value=mock_redis_client),
    ):
        # Reset the global _redis_client before each test
        import app.api.core.dependencies.redis_service as redis_module

        redis_module._redis_client = None
        redis_module._connection_pool = None
        yield mock_redis_client
        redis_module._redis_client = None
        redis_module._connection_pool = None


@pytest_asyncio.fixture
async def test_session():
    """
    In-memory SQLite session with every table created. A StaticPool keeps the
    single connection alive so the database survives across commits.
    """
    engine = build_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    session_maker = make_session_factory(engine)
    async with session_maker() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def app(test_session: AsyncSession):
    """FastAPI app with the full API router and test DB dependency override."""
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(api_router)

    async def override_get_db():
        yield test_session

    app.dependency_overrides[get_db] = override_get_db
    return app


@pytest_asyncio.fixture
async def client(app: FastAPI):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest.fixture
def admin_password() -> str:
    return ADMIN_PASSWORD


@pytest_asyncio.fixture
async def admin_user(test_session: AsyncSession) -> AdminUser:
    admin = AdminUser(
        username="admin",
        full_name="Site Admin",
        email="admin@myzuwa.com",
        password_hash=hash_password(ADMIN_PASSWORD),
    )
    test_session.add(admin)
    await test_session.commit()
    await test_session.refresh(admin)
    return admin


@pytest.fixture
def admin_headers(admin_user: AdminUser) -> dict:
    token = create_access_token(admin_id=str(admin_user.id), role=admin_user.role)
    return {"Authorization": f"Bearer {token}"}
