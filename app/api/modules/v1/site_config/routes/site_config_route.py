import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.core.dependencies.auth import get_current_admin
from app.api.db.database import get_db
from app.api.modules.v1.site_config.routes.docs.site_config_route_docs import (
    admin_list_custom_errors,
    admin_list_custom_success,
    create_content_custom_errors,
    create_content_custom_success,
    create_content_responses,
    list_content_custom_errors,
    list_content_custom_success,
    list_content_responses,
    list_settings_custom_errors,
    list_settings_custom_success,
    list_settings_responses,
    site_config_custom_errors,
    site_config_custom_success,
    update_content_custom_errors,
    update_content_custom_success,
    update_settings_custom_errors,
    update_settings_custom_success,
    update_settings_responses,
)
from app.api.modules.v1.site_config.schemas.site_config_schema import (
    SettingsUpdateRequest,
    SiteContentCreate,
    SiteContentResponse,
    SiteContentUpdate,
    SiteSettingResponse,
)
from app.api.modules.v1.site_config.service.content_service import ContentService
from app.api.modules.v1.site_config.service.settings_service import SettingsService
from app.api.modules.v1.users.models.users_model import AdminUser
from app.api.utils.response_payloads import success_response

router = APIRouter(tags=["Site Config"])
admin_router = APIRouter(prefix="/admin", tags=["Site Config"])
logger = logging.getLogger("app")


def _content(rows):
    return [SiteContentResponse.model_validate(r).model_dump(mode="json") for r in rows]


def _settings(rows):
    return [SiteSettingResponse.model_validate(r).model_dump(mode="json") for r in rows]


@router.get("/content", status_code=status.HTTP_200_OK, responses=list_content_responses)  # type: ignore
async def list_content(db: AsyncSession = Depends(get_db)):
    """Active site content rows for rendering the public pages."""
    rows = await ContentService(db).list_content(active_only=True)
    return success_response(status.HTTP_200_OK, data=_content(rows))


list_content._custom_errors = list_content_custom_errors  # type: ignore
list_content._custom_success = list_content_custom_success  # type: ignore


@router.get("/settings", status_code=status.HTTP_200_OK, responses=list_settings_responses)  # type: ignore
async def list_settings(db: AsyncSession = Depends(get_db)):
    """Non-sensitive settings rows."""
    rows = await SettingsService(db).list_settings(include_sensitive=False)
    return success_response(status.HTTP_200_OK, data=_settings(rows))


list_settings._custom_errors = list_settings_custom_errors  # type: ignore
list_settings._custom_success = list_settings_custom_success  # type: ignore


@router.get("/settings/site-config", status_code=status.HTTP_200_OK)
async def get_site_config(db: AsyncSession = Depends(get_db)):
    """
    The typed site configuration: defaults overlaid with stored settings.

    Nested sections (``socialMedia``, ``emailNotifications``, ``features``,
    ``footerSettings``) are returned as objects. Sensitive fields are omitted.
    """
    config = await SettingsService(db).get_configuration(include_sensitive=False)
    return success_response(status.HTTP_200_OK, data=config)


get_site_config._custom_errors = site_config_custom_errors  # type: ignore
get_site_config._custom_success = site_config_custom_success  # type: ignore


@admin_router.get("/content", status_code=status.HTTP_200_OK)
async def admin_list_content(
    db: AsyncSession = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    rows = await ContentService(db).list_content(active_only=False)
    return success_response(status.HTTP_200_OK, data=_content(rows))


admin_list_content._custom_errors = admin_list_custom_errors  # type: ignore
admin_list_content._custom_success = admin_list_custom_success  # type: ignore


@admin_router.post(
    "/content",
    status_code=status.HTTP_201_CREATED,
    responses=create_content_responses,  # type: ignore
)
async def create_content(
    payload: SiteContentCreate,
    db: AsyncSession = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    """Create a content row. The key must not already exist."""
    content = await ContentService(db).create_content(payload, admin_id=admin.id)
    return success_response(status.HTTP_201_CREATED, data=_content([content])[0])


create_content._custom_errors = create_content_custom_errors  # type: ignore
create_content._custom_success = create_content_custom_success  # type: ignore


@admin_router.put("/content/{key}", status_code=status.HTTP_200_OK)
async def update_content(
    key: str,
    payload: SiteContentUpdate,
    db: AsyncSession = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    content = await ContentService(db).update_content(key, payload, admin_id=admin.id)
    return success_response(status.HTTP_200_OK, data=_content([content])[0])


update_content._custom_errors = update_content_custom_errors  # type: ignore
update_content._custom_success = update_content_custom_success  # type: ignore


@admin_router.get("/settings", status_code=status.HTTP_200_OK)
async def admin_list_settings(
    db: AsyncSession = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    rows = await SettingsService(db).list_settings(include_sensitive=True)
    return success_response(status.HTTP_200_OK, data=_settings(rows))


admin_list_settings._custom_errors = admin_list_custom_errors  # type: ignore
admin_list_settings._custom_success = admin_list_custom_success  # type: ignore


@admin_router.put(
    "/settings",
    status_code=status.HTTP_200_OK,
    responses=update_settings_responses,  # type: ignore
)
async def update_settings(
    payload: SettingsUpdateRequest,
    db: AsyncSession = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    """
    Update several settings at once, all or nothing.

    Body: ``{"settings": [{"key": "waitlistEnabled", "value": false}, ...]}``.
    Values may be text or native JSON values; they are checked against the
    row's type and the typed site configuration before anything is written.
    """
    rows = await SettingsService(db).update_settings(payload.settings, admin_id=admin.id)
    logger.info(f"Admin {admin.username} updated {len(rows)} site settings")
    return success_response(status.HTTP_200_OK, data=_settings(rows))


update_settings._custom_errors = update_settings_custom_errors  # type: ignore
update_settings._custom_success = update_settings_custom_success  # type: ignore
