from pathlib import Path

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel

from app.api.core.config import settings

BASE_DIR = Path(__file__).resolve().parent

Base = SQLModel


def get_db_url() -> str:
    """
    Async database URL for the configured backend.

    ``DB_TYPE=sqlite`` stores the waitlist in a local file next to this module;
    anything else is treated as PostgreSQL through asyncpg.
    """
    if settings.DB_TYPE == "sqlite":
        return f"sqlite+aiosqlite:///{BASE_DIR}/db.sqlite3"

    return (
        f"postgresql+asyncpg://{settings.DB_USER}:{settings.DB_PASS}"
        f"@{settings.DB_HOST}:{settings.DB_PORT}/{settings.DB_NAME}"
    )


def build_engine(url: str, **overrides) -> AsyncEngine:
    """
    Create an async engine with the per-backend options the app relies on.

    SQLite connections are shared between the event loop's threads, so the
    same-thread check is disabled; pooled PostgreSQL connections are pinged
    before reuse. ``overrides`` go straight to ``create_async_engine``.
    """
    options = {"echo": settings.DB_ECHO}
    if url.startswith("sqlite"):
        options["connect_args"] = {"check_same_thread": False}
    else:
        options["pool_pre_ping"] = True
    options.update(overrides)
    return create_async_engine(url, **options)


def make_session_factory(bind: AsyncEngine) -> async_sessionmaker:
    # Entries are serialized after commit, so attributes must not expire.
    return async_sessionmaker(
        bind=bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


engine = build_engine(get_db_url())
AsyncSessionLocal = make_session_factory(engine)


async def get_db():
    """Request-scoped session: committed on success, rolled back on any error."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
