from fastapi import APIRouter

from app.api.modules.v1.admin.routes.admin_route import router as admin_router
from app.api.modules.v1.auth.routes.login_route import router as auth_router
from app.api.modules.v1.site_config.routes.site_config_route import (
    admin_router as site_config_admin_router,
)
from app.api.modules.v1.site_config.routes.site_config_route import router as site_config_router
from app.api.modules.v1.waitlist.routes.waitlist_route import router as waitlist_router

router = APIRouter(prefix="/v1")
router.include_router(waitlist_router)
router.include_router(auth_router)
router.include_router(admin_router)
router.include_router(site_config_router)
router.include_router(site_config_admin_router)
