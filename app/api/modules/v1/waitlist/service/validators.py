import re
from typing import Any, Dict, List, Mapping

__all__ = [
    "OTHER_OPTION",
    "REQUIRED_DETAIL_FIELDS",
    "validate_email",
    "validate_phone",
    "validate_required",
    "validate_details",
    "validate_waitlist_form",
]

OTHER_OPTION = "Other"

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_PATTERN = re.compile(r"^[+]?[\d\s()\-]+$")
MIN_PHONE_LENGTH = 10

# snake_case attribute -> (camelCase error key, human label)
REQUIRED_DETAIL_FIELDS = {
    "full_name": ("fullName", "Full name"),
    "phone_number": ("phoneNumber", "Phone number"),
    "type_of_business": ("typeOfBusiness", "Business type"),
    "country": ("country", "Country"),
    "city": ("city", "City"),
}


def validate_email(email: str) -> str:
    """Return an error message for an invalid email, or an empty string."""
    if not email or not email.strip():
        return "Email is required"
    if not EMAIL_PATTERN.match(email.strip()):
        return "Please enter a valid email address"
    return ""


def validate_phone(phone: str) -> str:
    """Return an error message for an invalid phone number, or an empty string.

    Accepts digits, spaces, ``+``, ``-``, ``(`` and ``)`` only, with at least
    ten characters once surrounding whitespace is removed.
    """
    if not phone or not phone.strip():
        return "Phone number is required"
    stripped = phone.strip()
    if not PHONE_PATTERN.match(stripped) or len(stripped) < MIN_PHONE_LENGTH:
        return "Please enter a valid phone number"
    return ""


def validate_required(value: Any, label: str) -> str:
    if value is None or not str(value).strip():
        return f"{label} is required"
    return ""


def _is_blank(value: Any) -> bool:
    return value is None or not str(value).strip()


def _add(errors: Dict[str, List[str]], key: str, message: str) -> None:
    if message:
        errors.setdefault(key, []).append(message)


def validate_details(
    provided: Mapping[str, Any],
    current: Mapping[str, Any],
    require_complete: bool = False,
) -> Dict[str, List[str]]:
    """Collect every validation failure for a details submission.

    Fields in ``provided`` are checked for content; the conditional "Other"
    rules are evaluated against ``current`` overlaid with ``provided`` so a
    custom value stored earlier still satisfies them. When ``require_complete``
    is set every required field must be present in the merged view.

    Args:
        provided: Fields sent in this request, keyed by snake_case name.
        current: Fields already stored on the entry, keyed by snake_case name.
        require_complete: Enforce all required fields on the merged view.

    Returns:
        Errors keyed by camelCase field name; empty when the submission is valid.
    """
    errors: Dict[str, List[str]] = {}
    merged = {**current, **provided}

    for field, (key, label) in REQUIRED_DETAIL_FIELDS.items():
        if field in provided or require_complete:
            value = merged.get(field)
            if field == "phone_number":
                _add(errors, key, validate_phone(value or ""))
            else:
                _add(errors, key, validate_required(value, label))

    if merged.get("type_of_business") == OTHER_OPTION and _is_blank(
        merged.get("custom_business_types")
    ):
        _add(errors, "customBusinessTypes", "Please specify your business type")

    if merged.get("country") == OTHER_OPTION and _is_blank(merged.get("custom_country")):
        _add(errors, "customCountry", "Please specify your country")

    return errors


def validate_waitlist_form(data: Mapping[str, Any]) -> Dict[str, List[str]]:
    """Validate a complete waitlist form (email plus every required detail)."""
    errors: Dict[str, List[str]] = {}
    _add(errors, "email", validate_email(data.get("email") or ""))
    details = {k: v for k, v in data.items() if k != "email"}
    for key, messages in validate_details(details, {}, require_complete=True).items():
        errors.setdefault(key, []).extend(messages)
    return errors
