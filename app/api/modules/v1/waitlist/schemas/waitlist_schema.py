from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Tuple
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from app.api.core.exceptions import format_validation_errors
from app.api.modules.v1.waitlist.models.waitlist_model import WaitlistStatus


class _CamelInput(BaseModel):
    """Accepts both snake_case and camelCase keys; unknown keys are dropped."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class EmailCaptureRequest(_CamelInput):
    """First step of the flow: reserve an email, with optional attribution."""

    email: EmailStr
    referrer: Optional[str] = Field(default=None, max_length=2048)
    utm_source: Optional[str] = Field(default=None, max_length=100)
    utm_medium: Optional[str] = Field(default=None, max_length=100)
    utm_campaign: Optional[str] = Field(default=None, max_length=100)

    @field_validator("email", mode="before")
    @classmethod
    def validate_email(cls, v):
        if v is None or not str(v).strip():
            raise ValueError("Email is required")
        return str(v).strip()


class WaitlistDetailsUpdate(_CamelInput):
    """
    Second step of the flow. Every field is optional; what is sent is merged
    into the entry. ``email`` is not an accepted field, so it can never change here.
    """

    full_name: Optional[str] = Field(default=None, max_length=255)
    phone_number: Optional[str] = Field(default=None, max_length=50)
    type_of_business: Optional[str] = Field(default=None, max_length=100)
    custom_business_types: Optional[str] = Field(default=None, max_length=2000)
    country: Optional[str] = Field(default=None, max_length=100)
    custom_country: Optional[str] = Field(default=None, max_length=100)
    city: Optional[str] = Field(default=None, max_length=100)
    has_run_store_before: bool = False
    wants_tutorial_book: bool = False

    @classmethod
    def parse_partial(
        cls, raw: Mapping[str, Any]
    ) -> Tuple["WaitlistDetailsUpdate", Dict[str, List[str]]]:
        """
        Validate a raw payload without stopping at the first bad field.

        Fields that fail their type or length check are reported in the returned
        error map (keyed by camelCase name) and left out of the returned model, so
        the remaining fields can still go through the business rules.
        """
        try:
            return cls.model_validate(raw), {}
        except ValidationError as exc:
            errors = exc.errors()

        failed = {cls._field_name(err["loc"][0]) for err in errors if err.get("loc")}
        clean = {key: value for key, value in raw.items() if cls._field_name(key) not in failed}
        details = format_validation_errors(
            errors, key_for=lambda loc: cls._error_key(cls._field_name(loc))
        )
        return cls.model_validate(clean), details

    @classmethod
    def _field_name(cls, key: Any) -> str:
        for name, info in cls.model_fields.items():
            if key in (name, info.alias):
                return name
        return str(key)

    @classmethod
    def _error_key(cls, name: str) -> str:
        info = cls.model_fields.get(name)
        return info.alias if info is not None and info.alias else name

    def provided_fields(self) -> dict:
        """Fields explicitly sent (null included), string values trimmed."""
        data = self.model_dump(exclude_unset=True)
        return {k: v.strip() if isinstance(v, str) else v for k, v in data.items()}


class BulkDeleteRequest(BaseModel):
    ids: List[str] = Field(..., min_length=1)


class WaitlistEntryResponse(BaseModel):
    """Fully materialized entry as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str
    full_name: Optional[str] = None
    phone_number: Optional[str] = None
    type_of_business: Optional[str] = None
    custom_business_types: Optional[str] = None
    country: Optional[str] = None
    custom_country: Optional[str] = None
    city: Optional[str] = None
    has_run_store_before: bool = False
    wants_tutorial_book: bool = False
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    referrer: Optional[str] = None
    utm_source: Optional[str] = None
    utm_medium: Optional[str] = None
    utm_campaign: Optional[str] = None
    status: WaitlistStatus
    email_verified: bool = False
    email_verification_sent_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class WaitlistFilters(BaseModel):
    """Optional admin list filters, equivalent to the dashboard's client-side filters."""

    search: Optional[str] = None
    country: Optional[str] = None
    business_type: Optional[str] = None
    has_run_store_before: Optional[bool] = None
    wants_tutorial_book: Optional[bool] = None
    status: Optional[WaitlistStatus] = None
