import pytest

from app.api.core.exceptions import InputValidationError, NotFoundError
from app.api.modules.v1.site_config.schemas.site_config_schema import (
    SiteContentCreate,
    SiteContentUpdate,
)
from app.api.modules.v1.site_config.service.content_service import ContentService


@pytest.mark.asyncio
async def test_create_and_list_content(test_session, admin_user):
    service = ContentService(test_session)

    created = await service.create_content(
        SiteContentCreate(key="hero_title", value="Be first in line", category="hero"),
        admin_id=admin_user.id,
    )
    await service.create_content(
        SiteContentCreate(key="old_banner", value="Bye", is_active=False)
    )

    assert created.updated_by == admin_user.id
    assert created.type == "text"
    assert [c.key for c in await service.list_content()] == ["hero_title"]
    assert {c.key for c in await service.list_content(active_only=False)} == {
        "hero_title",
        "old_banner",
    }


@pytest.mark.asyncio
async def test_create_content_duplicate_key(test_session):
    service = ContentService(test_session)
    await service.create_content(SiteContentCreate(key="hero_title", value="One"))

    with pytest.raises(InputValidationError) as exc_info:
        await service.create_content(SiteContentCreate(key="hero_title", value="Two"))

    assert exc_info.value.details == {"key": ["The key has already been taken."]}


@pytest.mark.asyncio
async def test_update_content(test_session, admin_user):
    service = ContentService(test_session)
    await service.create_content(SiteContentCreate(key="hero_title", value="One"))

    updated = await service.update_content(
        "hero_title", SiteContentUpdate(value="Two", is_active=False), admin_id=admin_user.id
    )

    assert updated.value == "Two"
    assert updated.is_active is False
    assert updated.category == "general"
    assert updated.updated_by == admin_user.id


@pytest.mark.asyncio
async def test_update_missing_content(test_session):
    with pytest.raises(NotFoundError):
        await ContentService(test_session).update_content("nope", SiteContentUpdate(value="x"))
