import logging
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

import httpx
from pydantic.alias_generators import to_camel

from app.api.modules.v1.waitlist.service.validators import validate_email, validate_waitlist_form

logger = logging.getLogger("app")

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


class FormStep(str, Enum):
    EMAIL = "email"
    DETAILS = "details"
    SUCCESS = "success"


class WaitlistFlowError(Exception):
    """Raised for API failures that are not field errors the user can fix."""

    def __init__(self, message: str, code: str = "ERROR", status_code: Optional[int] = None):
        self.message = message
        self.code = code
        self.status_code = status_code
        super().__init__(message)


class WaitlistFlow:
    """
    Drives the signup flow against the API: email, then details, then success.

    Only the current step, the entry id, the email and the last field errors
    are held here; the entry itself lives on the server, so a flow can be
    abandoned and resumed by capturing the same email again.

    Usage:
        async with httpx.AsyncClient(base_url="https://api.example.com") as client:
            flow = WaitlistFlow(client)
            if await flow.submit_email("ada@example.com"):
                await flow.submit_details({"full_name": "Ada Obi", ...})
    """

    def __init__(self, client: httpx.AsyncClient, api_prefix: str = "/api/v1"):
        self.client = client
        self.api_prefix = api_prefix.rstrip("/")
        self.reset()

    def reset(self) -> None:
        self.step = FormStep.EMAIL
        self.entry_id: Optional[str] = None
        self.email: Optional[str] = None
        self.errors: Dict[str, List[str]] = {}

    def back(self) -> None:
        """Return from the details step to the email step, keeping the email."""
        if self.step == FormStep.DETAILS:
            self.step = FormStep.EMAIL
            self.errors = {}

    async def submit_email(self, email: str) -> bool:
        """
        Reserve ``email``. Returns True and moves to the details step on success;
        returns False with ``errors`` set when the email is rejected.
        """
        self.errors = {}
        message = validate_email(email)
        if message:
            self.errors = {"email": [message]}
            return False

        response = await self.client.post(
            f"{self.api_prefix}/waitlist/email-capture", json={"email": email.strip()}
        )
        body = self._json(response)

        if response.status_code in (200, 201):
            entry = body["data"]
            self.entry_id = entry["id"]
            self.email = entry["email"]
            self.step = FormStep.DETAILS
            return True

        error = body.get("error") or {}
        if response.status_code == 409:
            self.errors = {"email": [error.get("message", "This email is already used.")]}
            return False
        if response.status_code == 422:
            self.errors = error.get("details") or {"email": [error.get("message", "Invalid input.")]}
            return False

        raise self._flow_error(response, error)

    async def submit_details(self, details: Mapping[str, Any]) -> bool:
        """
        Submit the profile fields (snake_case keys). The whole form is validated
        locally first; on success the flow moves to the success step.
        """
        if self.step != FormStep.DETAILS or not self.entry_id:
            raise WaitlistFlowError("Submit an email before the details.", code="INVALID_STEP")

        self.errors = validate_waitlist_form({**details, "email": self.email})
        if self.errors:
            return False

        payload = {to_camel(k): v for k, v in details.items() if k in DETAIL_FIELDS}
        response = await self.client.put(
            f"{self.api_prefix}/waitlist/{self.entry_id}", json=payload
        )
        body = self._json(response)

        if response.status_code == 200:
            self.step = FormStep.SUCCESS
            return True

        error = body.get("error") or {}
        if response.status_code == 422:
            self.errors = error.get("details") or {}
            return False

        raise self._flow_error(response, error)

    @staticmethod
    def _json(response: httpx.Response) -> dict:
        try:
            return response.json()
        except ValueError:
            return {}

    @staticmethod
    def _flow_error(response: httpx.Response, error: dict) -> WaitlistFlowError:
        logger.error(f"Waitlist API error {response.status_code}: {error}")
        return WaitlistFlowError(
            error.get("message", "Something went wrong. Please try again."),
            code=error.get("code", "ERROR"),
            status_code=response.status_code,
        )
