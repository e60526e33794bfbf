import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.core.config import settings
from app.api.core.dependencies.auth import get_current_admin
from app.api.core.dependencies.redis_service import check_rate_limit
from app.api.core.exceptions import AppError, RateLimitExceeded
from app.api.db.database import get_db
from app.api.modules.v1.users.models.users_model import AdminUser
from app.api.modules.v1.waitlist.routes.docs.waitlist_route_docs import (
    bulk_delete_custom_errors,
    bulk_delete_custom_success,
    bulk_delete_responses,
    capture_email_custom_errors,
    capture_email_custom_success,
    capture_email_responses,
    delete_entry_custom_errors,
    delete_entry_custom_success,
    delete_entry_responses,
    get_entry_custom_errors,
    get_entry_custom_success,
    get_entry_responses,
    list_entries_custom_errors,
    list_entries_custom_success,
    list_entries_responses,
    update_details_custom_errors,
    update_details_custom_success,
    update_details_responses,
)
from app.api.modules.v1.waitlist.schemas.waitlist_schema import (
    BulkDeleteRequest,
    EmailCaptureRequest,
    WaitlistDetailsUpdate,
    WaitlistEntryResponse,
    WaitlistFilters,
)
from app.api.modules.v1.waitlist.service.waitlist_service import WaitlistService
from app.api.utils.client_info import get_client_ip, get_referrer, get_user_agent
from app.api.utils.response_payloads import error_response, success_response

router = APIRouter(prefix="/waitlist", tags=["Waitlist"])
logger = logging.getLogger("app")

CAPTURE_WINDOW_SECONDS = 3600


def _serialize(entry) -> dict:
    return WaitlistEntryResponse.model_validate(entry).model_dump(mode="json")


@router.post(
    "/email-capture",
    status_code=status.HTTP_201_CREATED,
    responses=capture_email_responses,  # type: ignore
)
async def capture_email(
    request: Request,
    payload: EmailCaptureRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Reserve an email on the waitlist (first step of the signup flow).

    Returns:
    - 201: New entry created with status ``pending``
    - 200: Email already has a pending entry; it is returned unchanged
    - 409: Email belongs to a completed entry (EMAIL_USED)
    - 422: Invalid email
    - 429: Too many captures from this client
    """
    client_ip = get_client_ip(request)

    try:
        allowed = await check_rate_limit(
            f"capture:{client_ip}",
            max_attempts=settings.CAPTURE_MAX_ATTEMPTS_PER_HOUR,
            window_seconds=CAPTURE_WINDOW_SECONDS,
        )
        if not allowed:
            raise RateLimitExceeded(
                retry_after=CAPTURE_WINDOW_SECONDS,
                message="Too many requests. Please try again later.",
            )

        entry, created = await WaitlistService(db).capture_email(
            payload,
            ip_address=client_ip,
            user_agent=get_user_agent(request),
            referrer=get_referrer(request),
        )

        return success_response(
            status.HTTP_201_CREATED if created else status.HTTP_200_OK,
            data=_serialize(entry),
        )
    except AppError:
        raise
    except Exception as e:
        logger.error(
            f"Unexpected error during email capture - Email: {payload.email}, Error: {str(e)}",
            exc_info=True,
        )
        return error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            code="INTERNAL_SERVER_ERROR",
            message="An unexpected error occurred. Please try again later.",
        )


capture_email._custom_errors = capture_email_custom_errors  # type: ignore
capture_email._custom_success = capture_email_custom_success  # type: ignore


@router.post(
    "/bulk-delete",
    status_code=status.HTTP_200_OK,
    responses=bulk_delete_responses,  # type: ignore
)
async def bulk_delete_entries(
    payload: BulkDeleteRequest,
    db: AsyncSession = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    """
    Delete several entries in one call. Every id must exist; if any does not,
    nothing is deleted and a VALIDATION_ERROR lists the unknown ids.
    """
    deleted = await WaitlistService(db).bulk_delete(payload.ids)
    logger.info(f"Admin {admin.username} bulk deleted {deleted} waitlist entries")
    return success_response(status.HTTP_200_OK, data={"deleted": deleted})


bulk_delete_entries._custom_errors = bulk_delete_custom_errors  # type: ignore
bulk_delete_entries._custom_success = bulk_delete_custom_success  # type: ignore


@router.get("", status_code=status.HTTP_200_OK, responses=list_entries_responses)  # type: ignore
async def list_entries(
    filters: WaitlistFilters = Depends(),
    db: AsyncSession = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    """
    List waitlist entries, oldest first.

    All query parameters are optional; without them every entry is returned.
    ``search`` matches a case-insensitive substring of the full name or email.
    """
    entries = await WaitlistService(db).list_entries(filters)
    return success_response(status.HTTP_200_OK, data=[_serialize(e) for e in entries])


list_entries._custom_errors = list_entries_custom_errors  # type: ignore
list_entries._custom_success = list_entries_custom_success  # type: ignore


@router.get("/{entry_id}", status_code=status.HTTP_200_OK, responses=get_entry_responses)  # type: ignore
async def get_entry(
    entry_id: str,
    db: AsyncSession = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    entry = await WaitlistService(db).get_entry(entry_id)
    return success_response(status.HTTP_200_OK, data=_serialize(entry))


get_entry._custom_errors = get_entry_custom_errors  # type: ignore
get_entry._custom_success = get_entry_custom_success  # type: ignore


@router.put(
    "/{entry_id}",
    status_code=status.HTTP_200_OK,
    responses=update_details_responses,  # type: ignore
    openapi_extra={
        "requestBody": {
            "content": {
                "application/json": {
                    "schema": WaitlistDetailsUpdate.model_json_schema(by_alias=True)
                }
            }
        }
    },
)
async def update_details(
    entry_id: str,
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
):
    """
    Submit profile details for an entry (second step of the signup flow).

    Provided fields are merged into the entry and its status becomes
    ``completed``. Keys may be snake_case or camelCase; ``email`` and unknown
    keys are ignored.

    The body is validated in one pass: type, length and business-rule
    failures come back together.

    Returns:
    - 200: Updated entry
    - 404: Unknown entry id
    - 422: Field errors, all collected, keyed by camelCase field name
    """
    try:
        entry = await WaitlistService(db).update_details(entry_id, payload)
        return success_response(status.HTTP_200_OK, data=_serialize(entry))
    except AppError:
        raise
    except Exception as e:
        logger.error(
            f"Unexpected error updating waitlist entry {entry_id}: {str(e)}",
            exc_info=True,
        )
        return error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            code="INTERNAL_SERVER_ERROR",
            message="An unexpected error occurred. Please try again later.",
        )


update_details._custom_errors = update_details_custom_errors  # type: ignore
update_details._custom_success = update_details_custom_success  # type: ignore


@router.delete(
    "/{entry_id}",
    status_code=status.HTTP_200_OK,
    responses=delete_entry_responses,  # type: ignore
)
async def delete_entry(
    entry_id: str,
    db: AsyncSession = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    await WaitlistService(db).delete_entry(entry_id)
    logger.info(f"Admin {admin.username} deleted waitlist entry {entry_id}")
    return success_response(status.HTTP_200_OK, data={"id": entry_id})


delete_entry._custom_errors = delete_entry_custom_errors  # type: ignore
delete_entry._custom_success = delete_entry_custom_success  # type: ignore
