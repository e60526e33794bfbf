import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Column, DateTime, Text
from sqlmodel import Field, SQLModel

SETTING_TYPES = ("text", "boolean", "number", "json")


class SiteContent(SQLModel, table=True):
    """Editable page copy, one row per key. Inactive rows are hidden from the public site."""

    __tablename__ = "site_content"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True, index=True, nullable=False)
    key: str = Field(max_length=100, unique=True, index=True, nullable=False)
    value: str = Field(sa_column=Column(Text, nullable=False))
    type: str = Field(default="text", max_length=20, nullable=False)
    category: str = Field(default="general", max_length=50, nullable=False)
    description: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    is_active: bool = Field(default=True, nullable=False)
    updated_by: Optional[uuid.UUID] = Field(default=None, nullable=True)

    created_at: datetime = Field(
        sa_column=Column(DateTime(timezone=True), nullable=False),
        default_factory=lambda: datetime.now(timezone.utc),
    )
    updated_at: datetime = Field(
        sa_column=Column(DateTime(timezone=True), nullable=False),
        default_factory=lambda: datetime.now(timezone.utc),
    )


class SiteSetting(SQLModel, table=True):
    """
    One site-level setting stored as text.

    ``type`` says how ``value`` decodes: ``text``, ``boolean``, ``number`` or
    ``json``. Sensitive rows are never served on the public endpoints.
    """

    __tablename__ = "site_settings"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True, index=True, nullable=False)
    key: str = Field(max_length=100, unique=True, index=True, nullable=False)
    value: str = Field(sa_column=Column(Text, nullable=False))
    type: str = Field(default="text", max_length=20, nullable=False)
    category: str = Field(default="general", max_length=50, nullable=False)
    description: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    is_sensitive: bool = Field(default=False, nullable=False)
    updated_by: Optional[uuid.UUID] = Field(default=None, nullable=True)

    created_at: datetime = Field(
        sa_column=Column(DateTime(timezone=True), nullable=False),
        default_factory=lambda: datetime.now(timezone.utc),
    )
    updated_at: datetime = Field(
        sa_column=Column(DateTime(timezone=True), nullable=False),
        default_factory=lambda: datetime.now(timezone.utc),
    )
