import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Literal, Optional, get_origin
from uuid import UUID

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from app.api.core.exceptions import InputValidationError
from app.api.modules.v1.site_config.models.site_config_model import SiteSetting
from app.api.modules.v1.site_config.schemas.site_config_schema import SettingUpdateItem
from app.api.modules.v1.site_config.schemas.site_configuration import (
    SENSITIVE_SETTINGS,
    SiteConfiguration,
)

logger = logging.getLogger("app")

# stored row key (camelCase) -> SiteConfiguration field name
FIELD_BY_KEY: Dict[str, str] = {
    (info.alias or name): name for name, info in SiteConfiguration.model_fields.items()
}


def setting_type_for(field_name: str) -> str:
    """Storage type of the row backing a top-level configuration field."""
    annotation = SiteConfiguration.model_fields[field_name].annotation
    if annotation is bool:
        return "boolean"
    if annotation is int:
        return "number"
    if annotation is str or get_origin(annotation) is Literal:
        return "text"
    return "json"


def encode_setting_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    return str(value)


def decode_setting_value(setting_type: str, raw: str) -> Any:
    """
    Decode a stored text value according to its row type.

    Raises:
        ValueError: If the text is not a valid value of that type.
    """
    if setting_type == "boolean":
        lowered = raw.strip().lower()
        if lowered in ("true", "1"):
            return True
        if lowered in ("false", "0"):
            return False
        raise ValueError("The value must be true or false.")

    if setting_type == "number":
        try:
            return int(raw)
        except ValueError:
            pass
        try:
            return float(raw)
        except ValueError:
            raise ValueError("The value must be a number.")

    if setting_type == "json":
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            raise ValueError("The value must be valid JSON.")

    return raw


def _decode_rows(rows: Iterable[SiteSetting]) -> Dict[str, Any]:
    data: Dict[str, Any] = {}
    for row in rows:
        if row.key not in FIELD_BY_KEY:
            continue
        try:
            data[row.key] = decode_setting_value(row.type, row.value)
        except ValueError:
            logger.warning(f"Ignoring undecodable site setting '{row.key}' ({row.type})")
    return data


def resolve_configuration(rows: Iterable[SiteSetting]) -> SiteConfiguration:
    """
    Overlay stored rows on the defaults.

    A stored value that fails validation falls back to its default instead of
    breaking the whole configuration.
    """
    data = _decode_rows(rows)
    try:
        return SiteConfiguration.model_validate(data)
    except ValidationError as e:
        invalid = {err["loc"][0] for err in e.errors() if err.get("loc")}
        logger.warning(f"Falling back to defaults for invalid site settings: {sorted(invalid)}")
        return SiteConfiguration.model_validate(
            {k: v for k, v in data.items() if k not in invalid}
        )


def _validation_details(exc: ValidationError) -> Dict[str, List[str]]:
    details: Dict[str, List[str]] = {}
    for err in exc.errors():
        field = ".".join(str(part) for part in err.get("loc", ())) or "settings"
        details.setdefault(field, []).append(err["msg"])
    return details


class SettingsService:
    """Site settings rows and the typed configuration they resolve to."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_settings(self, include_sensitive: bool = False) -> List[SiteSetting]:
        stmt = select(SiteSetting)
        if not include_sensitive:
            stmt = stmt.where(SiteSetting.is_sensitive.is_(False))
        result = await self.db.execute(stmt.order_by(SiteSetting.category, SiteSetting.key))
        return list(result.scalars().all())

    async def get_configuration(self, include_sensitive: bool = False) -> Dict[str, Any]:
        """Resolved configuration, camelCase keys; sensitive fields omitted unless asked for."""
        rows = await self.list_settings(include_sensitive=include_sensitive)
        config = resolve_configuration(rows)
        exclude = None if include_sensitive else set(SENSITIVE_SETTINGS)
        return config.model_dump(by_alias=True, mode="json", exclude=exclude)

    async def update_settings(
        self, items: List[SettingUpdateItem], admin_id: Optional[UUID] = None
    ) -> List[SiteSetting]:
        """
        Apply several setting changes in one transaction.

        Every key must already exist and every value must decode for its row's
        type; the configuration that would result must also validate. On any
        failure nothing is written.

        Raises:
            InputValidationError: With details keyed ``settings.<index>.key``,
                ``settings.<index>.value`` or the configuration field path.
        """
        keys = [item.key for item in items]
        result = await self.db.execute(select(SiteSetting).where(SiteSetting.key.in_(keys)))
        rows = {row.key: row for row in result.scalars().all()}

        errors: Dict[str, List[str]] = {}
        changes: Dict[str, str] = {}
        decoded: Dict[str, Any] = {}

        for index, item in enumerate(items):
            row = rows.get(item.key)
            if row is None:
                errors[f"settings.{index}.key"] = [f"The selected settings.{index}.key is invalid."]
                continue
            raw = encode_setting_value(item.value)
            try:
                decoded[item.key] = decode_setting_value(row.type, raw)
            except ValueError as e:
                errors[f"settings.{index}.value"] = [str(e)]
                continue
            changes[item.key] = raw

        if errors:
            raise InputValidationError(details=errors)

        candidate = _decode_rows(await self.list_settings(include_sensitive=True))
        candidate.update({k: v for k, v in decoded.items() if k in FIELD_BY_KEY})
        try:
            SiteConfiguration.model_validate(candidate)
        except ValidationError as e:
            raise InputValidationError(details=_validation_details(e))

        now = datetime.now(timezone.utc)
        for key, raw in changes.items():
            row = rows[key]
            row.value = raw
            row.updated_by = admin_id
            row.updated_at = now
            self.db.add(row)

        await self.db.commit()
        for row in rows.values():
            await self.db.refresh(row)

        logger.info(f"Updated site settings: {sorted(changes)}")
        return [rows[key] for key in changes]
