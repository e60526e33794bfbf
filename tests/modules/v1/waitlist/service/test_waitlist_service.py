import uuid
from datetime import datetime, timedelta, timezone

import pytest
from sqlmodel import select

from app.api.core.exceptions import ConflictError, InputValidationError, NotFoundError
from app.api.modules.v1.waitlist.models.waitlist_model import WaitlistEntry, WaitlistStatus
from app.api.modules.v1.waitlist.schemas.waitlist_schema import (
    EmailCaptureRequest,
    WaitlistDetailsUpdate,
    WaitlistFilters,
)
from app.api.modules.v1.waitlist.service.waitlist_service import (
    EMAIL_USED_MESSAGE,
    WaitlistService,
)

DETAILS = {
    "fullName": "Ada Obi",
    "phoneNumber": "0801234567",
    "typeOfBusiness": "Fashion",
    "country": "Nigeria",
    "city": "Lagos",
    "hasRunStoreBefore": True,
}


async def _add_entry(session, email, **fields) -> WaitlistEntry:
    entry = WaitlistEntry(email=email, **fields)
    session.add(entry)
    await session.commit()
    await session.refresh(entry)
    return entry


@pytest.mark.asyncio
async def test_capture_creates_pending_entry(test_session):
    service = WaitlistService(test_session)

    entry, created = await service.capture_email(
        EmailCaptureRequest(email="Ada@Example.com", utmSource="twitter"),
        ip_address="203.0.113.7",
        user_agent="pytest",
        referrer="https://google.com",
    )

    assert created is True
    assert entry.email == "ada@example.com"
    assert entry.status == WaitlistStatus.PENDING
    assert entry.ip_address == "203.0.113.7"
    assert entry.user_agent == "pytest"
    assert entry.referrer == "https://google.com"
    assert entry.utm_source == "twitter"


@pytest.mark.asyncio
async def test_capture_prefers_referrer_from_payload(test_session):
    entry, _ = await WaitlistService(test_session).capture_email(
        EmailCaptureRequest(email="ada@example.com", referrer="https://partner.example"),
        referrer="https://google.com",
    )
    assert entry.referrer == "https://partner.example"


@pytest.mark.asyncio
async def test_capture_resumes_pending_entry(test_session):
    service = WaitlistService(test_session)
    first, _ = await service.capture_email(
        EmailCaptureRequest(email="ada@example.com"), ip_address="1.1.1.1"
    )

    second, created = await service.capture_email(
        EmailCaptureRequest(email="ADA@example.com"), ip_address="2.2.2.2"
    )

    assert created is False
    assert second.id == first.id
    assert second.ip_address == "1.1.1.1"

    count = len((await test_session.execute(select(WaitlistEntry))).scalars().all())
    assert count == 1


@pytest.mark.asyncio
async def test_capture_rejects_completed_email(test_session):
    await _add_entry(test_session, "ada@example.com", status=WaitlistStatus.COMPLETED)

    with pytest.raises(ConflictError) as exc_info:
        await WaitlistService(test_session).capture_email(
            EmailCaptureRequest(email="ada@example.com")
        )

    assert exc_info.value.message == EMAIL_USED_MESSAGE
    assert exc_info.value.code == "EMAIL_USED"


@pytest.mark.asyncio
async def test_capture_race_loser_resumes_winner_row(test_session, monkeypatch):
    winner = await _add_entry(test_session, "ada@example.com")
    winner_id = winner.id

    service = WaitlistService(test_session)
    original = service._get_by_email
    calls = []

    async def lookup_misses_first_time(email):
        calls.append(email)
        if len(calls) == 1:
            return None
        return await original(email)

    monkeypatch.setattr(service, "_get_by_email", lookup_misses_first_time)

    entry, created = await service.capture_email(EmailCaptureRequest(email="ada@example.com"))

    assert created is False
    assert entry.id == winner_id
    assert len(calls) == 2


@pytest.mark.asyncio
async def test_capture_race_loser_conflicts_with_completed_winner(test_session, monkeypatch):
    await _add_entry(test_session, "ada@example.com", status=WaitlistStatus.COMPLETED)

    service = WaitlistService(test_session)
    original = service._get_by_email
    calls = []

    async def lookup_misses_first_time(email):
        calls.append(email)
        return None if len(calls) == 1 else await original(email)

    monkeypatch.setattr(service, "_get_by_email", lookup_misses_first_time)

    with pytest.raises(ConflictError):
        await service.capture_email(EmailCaptureRequest(email="ada@example.com"))


@pytest.mark.asyncio
async def test_update_details_completes_entry(test_session):
    entry = await _add_entry(test_session, "ada@example.com")
    created_at = entry.updated_at

    updated = await WaitlistService(test_session).update_details(
        str(entry.id), WaitlistDetailsUpdate.model_validate(DETAILS)
    )

    assert updated.status == WaitlistStatus.COMPLETED
    assert updated.full_name == "Ada Obi"
    assert updated.has_run_store_before is True
    assert updated.wants_tutorial_book is False
    assert updated.email == "ada@example.com"
    assert updated.updated_at >= created_at


@pytest.mark.asyncio
async def test_update_details_with_partial_payload_still_completes(test_session):
    entry = await _add_entry(test_session, "ada@example.com")

    updated = await WaitlistService(test_session).update_details(
        entry.id, WaitlistDetailsUpdate(city="Lagos")
    )

    assert updated.status == WaitlistStatus.COMPLETED
    assert updated.city == "Lagos"
    assert updated.full_name is None


@pytest.mark.asyncio
async def test_update_details_strict_mode_requires_full_profile(test_session):
    entry = await _add_entry(test_session, "ada@example.com")
    service = WaitlistService(test_session, require_complete_profile=True)

    with pytest.raises(InputValidationError) as exc_info:
        await service.update_details(entry.id, WaitlistDetailsUpdate(city="Lagos"))

    assert set(exc_info.value.details) == {"fullName", "phoneNumber", "typeOfBusiness", "country"}


@pytest.mark.asyncio
async def test_update_details_collects_errors_and_leaves_entry_untouched(test_session):
    entry = await _add_entry(test_session, "ada@example.com")
    entry_id = entry.id

    with pytest.raises(InputValidationError) as exc_info:
        await WaitlistService(test_session).update_details(
            entry_id,
            WaitlistDetailsUpdate(phoneNumber="12", typeOfBusiness="Other", fullName="Ada"),
        )

    assert exc_info.value.details == {
        "phoneNumber": ["Please enter a valid phone number"],
        "customBusinessTypes": ["Please specify your business type"],
    }
    stored = await test_session.get(WaitlistEntry, entry_id)
    assert stored.status == WaitlistStatus.PENDING
    assert stored.full_name is None


@pytest.mark.asyncio
async def test_update_details_ignores_email(test_session):
    entry = await _add_entry(test_session, "ada@example.com")

    updated = await WaitlistService(test_session).update_details(
        entry.id, WaitlistDetailsUpdate.model_validate({"email": "eve@example.com", "city": "Abuja"})
    )

    assert updated.email == "ada@example.com"


@pytest.mark.asyncio
async def test_update_details_unknown_id(test_session):
    service = WaitlistService(test_session)
    with pytest.raises(NotFoundError):
        await service.update_details(str(uuid.uuid4()), WaitlistDetailsUpdate(city="Lagos"))
    with pytest.raises(NotFoundError):
        await service.update_details("not-a-uuid", WaitlistDetailsUpdate(city="Lagos"))


@pytest.mark.asyncio
async def test_list_entries_oldest_first(test_session):
    base = datetime(2025, 1, 1, tzinfo=timezone.utc)
    await _add_entry(test_session, "c@example.com", created_at=base + timedelta(days=2))
    await _add_entry(test_session, "a@example.com", created_at=base)
    await _add_entry(test_session, "b@example.com", created_at=base + timedelta(days=1))

    entries = await WaitlistService(test_session).list_entries()

    assert [e.email for e in entries] == ["a@example.com", "b@example.com", "c@example.com"]


@pytest.mark.asyncio
async def test_list_entries_filters(test_session):
    await _add_entry(
        test_session,
        "ada@example.com",
        full_name="Ada Obi",
        country="Nigeria",
        type_of_business="Fashion",
        has_run_store_before=True,
        status=WaitlistStatus.COMPLETED,
    )
    await _add_entry(
        test_session,
        "kofi@example.com",
        full_name="Kofi Mensah",
        country="Ghana",
        type_of_business="Music",
        wants_tutorial_book=True,
    )
    service = WaitlistService(test_session)

    async def emails(**filters):
        return [e.email for e in await service.list_entries(WaitlistFilters(**filters))]

    assert await emails(search="OBI") == ["ada@example.com"]
    assert await emails(search="kofi@") == ["kofi@example.com"]
    assert await emails(search="%") == []
    assert await emails(country="Ghana") == ["kofi@example.com"]
    assert await emails(business_type="Fashion") == ["ada@example.com"]
    assert await emails(has_run_store_before=False) == ["kofi@example.com"]
    assert await emails(wants_tutorial_book=True) == ["kofi@example.com"]
    assert await emails(status=WaitlistStatus.PENDING) == ["kofi@example.com"]
    assert len(await emails()) == 2


@pytest.mark.asyncio
async def test_get_and_delete_entry(test_session):
    entry = await _add_entry(test_session, "ada@example.com")
    entry_id = entry.id
    service = WaitlistService(test_session)

    assert (await service.get_entry(str(entry_id))).email == "ada@example.com"

    await service.delete_entry(str(entry_id))

    with pytest.raises(NotFoundError):
        await service.get_entry(entry_id)
    with pytest.raises(NotFoundError):
        await service.delete_entry(entry_id)


@pytest.mark.asyncio
async def test_bulk_delete_removes_all_requested(test_session):
    first = await _add_entry(test_session, "a@example.com")
    second = await _add_entry(test_session, "b@example.com")
    keep = await _add_entry(test_session, "c@example.com")
    ids = [str(first.id), str(second.id), str(first.id)]
    keep_id = keep.id

    deleted = await WaitlistService(test_session).bulk_delete(ids)

    assert deleted == 2
    remaining = (await test_session.execute(select(WaitlistEntry.id))).scalars().all()
    assert remaining == [keep_id]


@pytest.mark.asyncio
async def test_bulk_delete_is_all_or_nothing(test_session):
    entry = await _add_entry(test_session, "a@example.com")
    missing = str(uuid.uuid4())

    with pytest.raises(InputValidationError) as exc_info:
        await WaitlistService(test_session).bulk_delete([str(entry.id), missing, "junk"])

    assert exc_info.value.details == {
        "ids": [
            f"The selected id {missing} is invalid.",
            "The selected id junk is invalid.",
        ]
    }
    remaining = (await test_session.execute(select(WaitlistEntry))).scalars().all()
    assert len(remaining) == 1


@pytest.mark.asyncio
async def test_update_details_from_raw_mapping_collects_every_error(test_session):
    entry = await _add_entry(test_session, "ada@example.com")
    entry_id = entry.id

    with pytest.raises(InputValidationError) as exc_info:
        await WaitlistService(test_session).update_details(
            entry_id,
            {"fullName": None, "country": "Other", "has_run_store_before": "maybe"},
        )

    details = exc_info.value.details
    assert set(details) == {"fullName", "customCountry", "hasRunStoreBefore"}
    assert details["fullName"] == ["Full name is required"]
    stored = await test_session.get(WaitlistEntry, entry_id)
    assert stored.status == WaitlistStatus.PENDING


@pytest.mark.asyncio
async def test_update_details_from_raw_mapping_completes(test_session):
    entry = await _add_entry(test_session, "ada@example.com")

    updated = await WaitlistService(test_session).update_details(
        entry.id, {**DETAILS, "city": "  Abuja "}
    )

    assert updated.status == WaitlistStatus.COMPLETED
    assert updated.city == "Abuja"
    assert updated.has_run_store_before is True


@pytest.mark.asyncio
async def test_blank_search_applies_no_filter(test_session):
    await _add_entry(test_session, "ada@example.com", full_name="Ada Obi")
    await _add_entry(test_session, "kofi@example.com")

    entries = await WaitlistService(test_session).list_entries(WaitlistFilters(search="   "))

    assert len(entries) == 2
