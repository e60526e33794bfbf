import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import router as api_router
from app.api.core.config import settings
from app.api.core.custom_openapi_docs import custom_openapi
from app.api.core.dependencies.redis_service import close_redis_client
from app.api.core.exceptions import register_exception_handlers
from app.api.core.logger import setup_logging
from app.api.db.database import AsyncSessionLocal, Base, engine
from app.api.modules.v1.site_config.seed.settings_seed import seed_site_settings
from app.api.utils.response_payloads import success_response

# Table models must be imported before create_all
from app.api.modules.v1.site_config.models import SiteContent, SiteSetting  # noqa: F401
from app.api.modules.v1.users.models.users_model import AdminUser  # noqa: F401
from app.api.modules.v1.waitlist.models import WaitlistEntry  # noqa: F401

setup_logging()
logger = logging.getLogger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize resources on startup and release them on shutdown.

    Args:
        app (FastAPI): FastAPI application instance supplied by the framework.

    Returns:
        AsyncIterator[None]: Asynchronous context manager controlling startup/shutdown.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with AsyncSessionLocal() as session:
        created = await seed_site_settings(session)
        if created:
            logger.info(f"Seeded {created} default site settings")

    try:
        yield
    finally:
        await close_redis_client()
        await engine.dispose()


app = FastAPI(
    title=f"{settings.APP_NAME} API",
    description=f"{settings.APP_NAME} API for waitlist capture, administration and site content",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc" if settings.DEBUG else None,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_exception_handlers(app)

app.openapi = lambda: custom_openapi(app)
app.include_router(api_router)


@app.get("/")
def read_root():
    return success_response(
        status_code=200,
        data={
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "environment": "Production" if not settings.DEBUG else "Development",
        },
    )


@app.get("/health")
def health_check():
    return success_response(status_code=200, data={"status": "healthy"})


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=settings.APP_PORT, reload=False)
