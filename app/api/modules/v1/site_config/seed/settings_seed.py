import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.modules.v1.site_config.models.site_config_model import SiteSetting
from app.api.modules.v1.site_config.schemas.site_configuration import (
    SENSITIVE_SETTINGS,
    SETTING_CATEGORIES,
    SiteConfiguration,
)
from app.api.modules.v1.site_config.service.settings_service import (
    FIELD_BY_KEY,
    encode_setting_value,
    setting_type_for,
)

logger = logging.getLogger("app")


async def seed_site_settings(db: AsyncSession) -> int:
    """
    Insert a settings row for every configuration field that has none.

    Existing rows are left untouched, so values edited by administrators
    survive restarts.

    Args:
        db (AsyncSession): Asynchronous SQLAlchemy session

    Returns:
        int: Number of rows created.
    """
    result = await db.execute(select(SiteSetting.key))
    existing = set(result.scalars().all())

    defaults = SiteConfiguration().model_dump(by_alias=True, mode="json")
    created = 0

    for key, value in defaults.items():
        if key in existing:
            continue

        field_name = FIELD_BY_KEY[key]
        db.add(
            SiteSetting(
                key=key,
                value=encode_setting_value(value),
                type=setting_type_for(field_name),
                category=SETTING_CATEGORIES.get(field_name, "general"),
                is_sensitive=field_name in SENSITIVE_SETTINGS,
            )
        )
        created += 1
        logger.info("Created site setting key=%s", key)

    if created:
        await db.commit()
    return created
