import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

import sqlalchemy as sa
from sqlalchemy import Column, DateTime, Text
from sqlmodel import Field, SQLModel


class WaitlistStatus(str, Enum):
    """Lifecycle states of a waitlist entry. ``pending`` -> ``completed`` only."""

    PENDING = "pending"
    COMPLETED = "completed"


class WaitlistEntry(SQLModel, table=True):
    """
    One waitlist registration.

    Created by email capture with status ``pending``; the details step fills in the
    profile fields and moves it to ``completed``. The unique constraint on ``email``
    is the authority for uniqueness, not the application-level lookup.

    Attribution fields (ip_address, user_agent, referrer, utm_*) are written once,
    at capture time.
    """

    __tablename__ = "waitlist_entries"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True, index=True, nullable=False)
    email: str = Field(max_length=255, unique=True, index=True, nullable=False)

    full_name: Optional[str] = Field(default=None, max_length=255)
    phone_number: Optional[str] = Field(default=None, max_length=50)
    type_of_business: Optional[str] = Field(default=None, max_length=100)
    custom_business_types: Optional[str] = Field(
        default=None, sa_column=Column(Text, nullable=True)
    )
    country: Optional[str] = Field(default=None, max_length=100)
    custom_country: Optional[str] = Field(default=None, max_length=100)
    city: Optional[str] = Field(default=None, max_length=100)
    has_run_store_before: bool = Field(default=False, nullable=False)
    wants_tutorial_book: bool = Field(default=False, nullable=False)

    ip_address: Optional[str] = Field(default=None, max_length=45)
    user_agent: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    referrer: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    utm_source: Optional[str] = Field(default=None, max_length=100)
    utm_medium: Optional[str] = Field(default=None, max_length=100)
    utm_campaign: Optional[str] = Field(default=None, max_length=100)

    status: WaitlistStatus = Field(
        sa_column=sa.Column(
            sa.Enum(
                WaitlistStatus,
                name="waitliststatus",
                values_callable=lambda statuses: [s.value for s in statuses],
            ),
            nullable=False,
            index=True,
        ),
        default=WaitlistStatus.PENDING,
    )

    email_verified: bool = Field(default=False, nullable=False)
    email_verification_token: Optional[str] = Field(default=None, max_length=255)
    email_verification_sent_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime(timezone=True), nullable=True)
    )

    created_at: datetime = Field(
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
        default_factory=lambda: datetime.now(timezone.utc),
    )
    updated_at: datetime = Field(
        sa_column=Column(DateTime(timezone=True), nullable=False),
        default_factory=lambda: datetime.now(timezone.utc),
    )

    @property
    def is_completed(self) -> bool:
        return self.status == WaitlistStatus.COMPLETED
