from datetime import datetime
from typing import Any, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SiteContentCreate(BaseModel):
    key: str = Field(..., max_length=100)
    value: str
    type: str = Field(default="text", max_length=20)
    category: str = Field(default="general", max_length=50)
    description: Optional[str] = None
    is_active: bool = True

    @field_validator("key", mode="before")
    @classmethod
    def validate_key(cls, v):
        if v is None or not str(v).strip():
            raise ValueError("Key is required")
        return str(v).strip()


class SiteContentUpdate(BaseModel):
    """Partial update of a content row; the key itself cannot change."""

    value: Optional[str] = None
    type: Optional[str] = Field(default=None, max_length=20)
    category: Optional[str] = Field(default=None, max_length=50)
    description: Optional[str] = None
    is_active: Optional[bool] = None


class SiteContentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    key: str
    value: str
    type: str
    category: str
    description: Optional[str] = None
    is_active: bool
    updated_by: Optional[UUID] = None
    created_at: datetime
    updated_at: datetime


class SiteSettingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    key: str
    value: str
    type: str
    category: str
    description: Optional[str] = None
    is_sensitive: bool
    updated_by: Optional[UUID] = None
    created_at: datetime
    updated_at: datetime


class SettingUpdateItem(BaseModel):
    """
    One setting change. ``value`` may be sent as text or as its native JSON
    type (``true``, ``42``, an object); it is stored as text either way.
    """

    key: str = Field(..., min_length=1, max_length=100)
    value: Any

    @field_validator("value")
    @classmethod
    def validate_value(cls, v):
        if v is None:
            raise ValueError("Value is required")
        return v


class SettingsUpdateRequest(BaseModel):
    settings: List[SettingUpdateItem] = Field(..., min_length=1)
