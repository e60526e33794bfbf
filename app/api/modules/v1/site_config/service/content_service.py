import logging
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from app.api.core.exceptions import InputValidationError, NotFoundError
from app.api.modules.v1.site_config.models.site_config_model import SiteContent
from app.api.modules.v1.site_config.schemas.site_config_schema import (
    SiteContentCreate,
    SiteContentUpdate,
)

logger = logging.getLogger("app")

KEY_TAKEN = {"key": ["The key has already been taken."]}


class ContentService:
    """Editable page copy keyed by name."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_content(self, active_only: bool = True) -> List[SiteContent]:
        stmt = select(SiteContent)
        if active_only:
            stmt = stmt.where(SiteContent.is_active.is_(True))
        result = await self.db.execute(stmt.order_by(SiteContent.category, SiteContent.key))
        return list(result.scalars().all())

    async def create_content(
        self, payload: SiteContentCreate, admin_id: Optional[UUID] = None
    ) -> SiteContent:
        """
        Create a content row.

        Raises:
            InputValidationError: If the key is already in use.
        """
        if await self._get_by_key(payload.key) is not None:
            raise InputValidationError(details=KEY_TAKEN)

        content = SiteContent(**payload.model_dump(), updated_by=admin_id)
        self.db.add(content)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise InputValidationError(details=KEY_TAKEN)

        await self.db.refresh(content)
        logger.info(f"Created site content '{content.key}'")
        return content

    async def update_content(
        self, key: str, payload: SiteContentUpdate, admin_id: Optional[UUID] = None
    ) -> SiteContent:
        content = await self._get_by_key(key)
        if content is None:
            raise NotFoundError("Content not found.")

        for field, value in payload.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(content, field, value)
        content.updated_by = admin_id
        content.updated_at = datetime.now(timezone.utc)

        self.db.add(content)
        await self.db.commit()
        await self.db.refresh(content)

        logger.info(f"Updated site content '{key}'")
        return content

    async def _get_by_key(self, key: str) -> Optional[SiteContent]:
        return await self.db.scalar(select(SiteContent).where(SiteContent.key == key))
