import logging
from datetime import datetime, timezone
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from sqlalchemy import delete, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.core.config import settings
from app.api.core.exceptions import ConflictError, InputValidationError, NotFoundError
from app.api.modules.v1.waitlist.models.waitlist_model import WaitlistEntry, WaitlistStatus
from app.api.modules.v1.waitlist.schemas.waitlist_schema import (
    EmailCaptureRequest,
    WaitlistDetailsUpdate,
    WaitlistFilters,
)
from app.api.modules.v1.waitlist.service.validators import REQUIRED_DETAIL_FIELDS, validate_details
from app.api.utils.validators import parse_uuid

logger = logging.getLogger("app")

EMAIL_USED_MESSAGE = "This email is already used by someone. Please try another email."
ENTRY_NOT_FOUND_MESSAGE = "Waitlist entry not found."

DETAIL_FIELDS = (
    "full_name",
    "phone_number",
    "type_of_business",
    "custom_business_types",
    "country",
    "custom_country",
    "city",
    "has_run_store_before",
    "wants_tutorial_book",
)


class WaitlistService:
    """
    Business logic for the waitlist entry lifecycle.

    Capture reserves an email (``pending``); the details step completes it.
    Administrators list, read and delete entries.
    """

    def __init__(self, db: AsyncSession, require_complete_profile: Optional[bool] = None):
        self.db = db
        self.require_complete_profile = (
            settings.WAITLIST_REQUIRE_COMPLETE_PROFILE
            if require_complete_profile is None
            else require_complete_profile
        )

    async def capture_email(
        self,
        payload: EmailCaptureRequest,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
        referrer: Optional[str] = None,
    ) -> Tuple[WaitlistEntry, bool]:
        """
        Reserve an email on the waitlist.

        - No entry: create one with status ``pending``.
        - Pending entry: return it unchanged so the user can resume the flow.
        - Completed entry: the email is claimed, raise ``ConflictError``.

        Two simultaneous first captures race on the unique constraint; the loser
        rolls back, re-reads the winner's row and resolves it like any existing row.

        Returns:
            Tuple of (entry, created).
        """
        email = str(payload.email).strip().lower()

        existing = await self._get_by_email(email)
        if existing is not None:
            return self._resolve_existing(existing), False

        entry = WaitlistEntry(
            email=email,
            status=WaitlistStatus.PENDING,
            ip_address=ip_address,
            user_agent=user_agent,
            referrer=payload.referrer or referrer,
            utm_source=payload.utm_source,
            utm_medium=payload.utm_medium,
            utm_campaign=payload.utm_campaign,
        )
        self.db.add(entry)

        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.info(f"Concurrent capture lost the insert race for {email}, re-reading")
            existing = await self._get_by_email(email)
            if existing is None:
                raise
            return self._resolve_existing(existing), False

        await self.db.refresh(entry)
        logger.info(f"New waitlist capture: {email} ({entry.id})")
        return entry, True

    def _resolve_existing(self, entry: WaitlistEntry) -> WaitlistEntry:
        if entry.is_completed:
            logger.warning(f"Capture rejected, email already completed: {entry.email}")
            raise ConflictError(EMAIL_USED_MESSAGE)
        logger.info(f"Resuming pending waitlist entry: {entry.email} ({entry.id})")
        return entry

    async def update_details(
        self, entry_id, payload: Union[WaitlistDetailsUpdate, Mapping[str, Any]]
    ) -> WaitlistEntry:
        """
        Merge profile fields into an entry and mark it ``completed``.

        Calling this operation is the completion signal: the status moves to
        ``completed`` whichever fields were sent, unless complete profiles are
        required by configuration.

        A raw mapping is validated field by field: type and length failures are
        reported together with the business-rule failures of the other fields.

        Raises:
            NotFoundError: If the id does not resolve to an entry.
            InputValidationError: With every field error collected.
        """
        entry = await self.get_entry(entry_id)

        type_errors: dict = {}
        if not isinstance(payload, WaitlistDetailsUpdate):
            payload, type_errors = WaitlistDetailsUpdate.parse_partial(payload)

        provided = payload.provided_fields()
        current = {field: getattr(entry, field) for field in REQUIRED_DETAIL_FIELDS}
        current["custom_business_types"] = entry.custom_business_types
        current["custom_country"] = entry.custom_country

        errors = dict(type_errors)
        for key, messages in validate_details(
            provided, current, self.require_complete_profile
        ).items():
            errors.setdefault(key, []).extend(messages)
        if errors:
            raise InputValidationError(details=errors)

        for field, value in provided.items():
            if field in DETAIL_FIELDS:
                setattr(entry, field, value)

        entry.status = WaitlistStatus.COMPLETED
        entry.updated_at = datetime.now(timezone.utc)

        self.db.add(entry)
        await self.db.commit()
        await self.db.refresh(entry)

        logger.info(f"Waitlist entry completed: {entry.email} ({entry.id})")
        return entry

    async def list_entries(self, filters: Optional[WaitlistFilters] = None) -> List[WaitlistEntry]:
        """
        Return entries oldest first, optionally narrowed by the dashboard filters.

        A blank or whitespace-only ``search`` applies no search filter.
        """
        stmt = select(WaitlistEntry)

        if filters is not None:
            term = (filters.search or "").strip().lower()
            if term:
                stmt = stmt.where(
                    or_(
                        func.lower(WaitlistEntry.full_name).contains(term, autoescape=True),
                        func.lower(WaitlistEntry.email).contains(term, autoescape=True),
                    )
                )
            if filters.country:
                stmt = stmt.where(WaitlistEntry.country == filters.country)
            if filters.business_type:
                stmt = stmt.where(WaitlistEntry.type_of_business == filters.business_type)
            if filters.has_run_store_before is not None:
                stmt = stmt.where(
                    WaitlistEntry.has_run_store_before.is_(filters.has_run_store_before)
                )
            if filters.wants_tutorial_book is not None:
                stmt = stmt.where(
                    WaitlistEntry.wants_tutorial_book.is_(filters.wants_tutorial_book)
                )
            if filters.status is not None:
                stmt = stmt.where(WaitlistEntry.status == filters.status)

        stmt = stmt.order_by(WaitlistEntry.created_at.asc())
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_entry(self, entry_id) -> WaitlistEntry:
        parsed = parse_uuid(entry_id)
        entry = await self.db.get(WaitlistEntry, parsed) if parsed else None
        if entry is None:
            raise NotFoundError(ENTRY_NOT_FOUND_MESSAGE)
        return entry

    async def delete_entry(self, entry_id) -> None:
        entry = await self.get_entry(entry_id)
        await self.db.delete(entry)
        await self.db.commit()
        logger.info(f"Deleted waitlist entry {entry.id} ({entry.email})")

    async def bulk_delete(self, ids: Iterable[str]) -> int:
        """
        Delete several entries, all or nothing.

        Every id is verified before anything is deleted; a single unknown id
        fails the whole request and leaves the table untouched.

        Returns:
            Number of entries deleted.
        """
        requested = list(dict.fromkeys(str(i).strip() for i in ids))
        parsed = {raw: parse_uuid(raw) for raw in requested}
        valid_ids = {value for value in parsed.values() if value is not None}

        found: set = set()
        if valid_ids:
            result = await self.db.execute(
                select(WaitlistEntry.id).where(WaitlistEntry.id.in_(valid_ids))
            )
            found = set(result.scalars().all())

        unknown = [raw for raw, value in parsed.items() if value is None or value not in found]
        if unknown:
            logger.warning(f"Bulk delete rejected, unknown ids: {unknown}")
            raise InputValidationError(
                details={"ids": [f"The selected id {raw} is invalid." for raw in unknown]}
            )

        await self.db.execute(delete(WaitlistEntry).where(WaitlistEntry.id.in_(found)))
        await self.db.commit()

        logger.info(f"Bulk deleted {len(found)} waitlist entries")
        return len(found)

    async def _get_by_email(self, email: str) -> Optional[WaitlistEntry]:
        result = await self.db.execute(select(WaitlistEntry).where(WaitlistEntry.email == email))
        return result.scalar_one_or_none()
