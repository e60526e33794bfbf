from pydantic import BaseModel


class WaitlistStats(BaseModel):
    """Dashboard counters over the whole waitlist."""

    total_entries: int = 0
    completed_entries: int = 0
    pending_entries: int = 0
    verified_emails: int = 0
    with_store_experience: int = 0
    wants_tutorial_book: int = 0
    countries: int = 0
