import csv
import logging
from datetime import datetime, timezone
from io import StringIO
from typing import Any, Iterable, List, Tuple

from sqlalchemy import case, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.modules.v1.admin.schemas.admin_schema import WaitlistStats
from app.api.modules.v1.waitlist.models.waitlist_model import WaitlistEntry, WaitlistStatus
from app.api.modules.v1.waitlist.service.waitlist_service import WaitlistService

logger = logging.getLogger("app")

# (header, attribute) in export order
CSV_COLUMNS: List[Tuple[str, str]] = [
    ("ID", "id"),
    ("Email", "email"),
    ("Full Name", "full_name"),
    ("Phone Number", "phone_number"),
    ("Type of Business", "type_of_business"),
    ("Custom Business Types", "custom_business_types"),
    ("Country", "country"),
    ("Custom Country", "custom_country"),
    ("City", "city"),
    ("Has Run Store Before", "has_run_store_before"),
    ("Wants Tutorial Book", "wants_tutorial_book"),
    ("IP Address", "ip_address"),
    ("User Agent", "user_agent"),
    ("Referrer", "referrer"),
    ("UTM Source", "utm_source"),
    ("UTM Medium", "utm_medium"),
    ("UTM Campaign", "utm_campaign"),
    ("Status", "status"),
    ("Email Verified", "email_verified"),
    ("Email Verification Sent At", "email_verification_sent_at"),
    ("Created At", "created_at"),
    ("Updated At", "updated_at"),
]


def _format_cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, WaitlistStatus):
        return value.value
    return str(value)


def entries_to_csv(entries: Iterable[WaitlistEntry]) -> Tuple[str, int]:
    """Render entries as CSV text with a header row. Returns (text, row_count)."""
    output = StringIO()
    writer = csv.writer(output)
    writer.writerow([header for header, _ in CSV_COLUMNS])

    rows = 0
    for entry in entries:
        writer.writerow([_format_cell(getattr(entry, attr)) for _, attr in CSV_COLUMNS])
        rows += 1

    return output.getvalue(), rows


def _count_where(condition):
    return func.coalesce(func.sum(case((condition, 1), else_=0)), 0)


class AdminService:
    """Read-side reporting for the dashboard: counters and CSV export."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_stats(self) -> WaitlistStats:
        stmt = select(
            func.count(WaitlistEntry.id),
            _count_where(WaitlistEntry.status == WaitlistStatus.COMPLETED),
            _count_where(WaitlistEntry.status == WaitlistStatus.PENDING),
            _count_where(WaitlistEntry.email_verified.is_(True)),
            _count_where(WaitlistEntry.has_run_store_before.is_(True)),
            _count_where(WaitlistEntry.wants_tutorial_book.is_(True)),
            func.count(func.distinct(WaitlistEntry.country)),
        )
        row = (await self.db.execute(stmt)).one()

        return WaitlistStats(
            total_entries=row[0] or 0,
            completed_entries=row[1] or 0,
            pending_entries=row[2] or 0,
            verified_emails=row[3] or 0,
            with_store_experience=row[4] or 0,
            wants_tutorial_book=row[5] or 0,
            countries=row[6] or 0,
        )

    async def export_csv(self) -> Tuple[str, str]:
        """
        Export every entry, in list order, as a CSV document.

        Returns:
            Tuple of (filename, csv_text)
        """
        entries = await WaitlistService(self.db).list_entries()
        content, rows = entries_to_csv(entries)

        filename = f"waitlist_{datetime.now(timezone.utc).strftime('%Y%m%d_%H%M%S')}.csv"
        logger.info(f"Exported {rows} waitlist entries to {filename}")
        return filename, content
