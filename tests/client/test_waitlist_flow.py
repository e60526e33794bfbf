import httpx
import pytest

from app.client import FormStep, WaitlistFlow, WaitlistFlowError

DETAILS = {
    "full_name": "Ada Obi",
    "phone_number": "+234 801 234 5678",
    "type_of_business": "Fashion",
    "country": "Nigeria",
    "city": "Lagos",
    "has_run_store_before": True,
    "wants_tutorial_book": False,
}


@pytest.mark.asyncio
async def test_full_flow(client):
    flow = WaitlistFlow(client)
    assert flow.step == FormStep.EMAIL

    assert await flow.submit_email("ada@example.com") is True
    assert flow.step == FormStep.DETAILS
    assert flow.entry_id
    assert flow.email == "ada@example.com"

    assert await flow.submit_details(DETAILS) is True
    assert flow.step == FormStep.SUCCESS
    assert flow.errors == {}


@pytest.mark.asyncio
async def test_invalid_email_never_reaches_api(client):
    flow = WaitlistFlow(client)

    assert await flow.submit_email("ada@") is False
    assert flow.errors == {"email": ["Please enter a valid email address"]}
    assert flow.step == FormStep.EMAIL


@pytest.mark.asyncio
async def test_completed_email_is_reported(client):
    first = WaitlistFlow(client)
    await first.submit_email("ada@example.com")
    await first.submit_details(DETAILS)

    second = WaitlistFlow(client)
    assert await second.submit_email("ada@example.com") is False
    assert second.errors == {
        "email": ["This email is already used by someone. Please try another email."]
    }
    assert second.step == FormStep.EMAIL


@pytest.mark.asyncio
async def test_abandoned_flow_resumes_same_entry(client):
    first = WaitlistFlow(client)
    await first.submit_email("ada@example.com")

    second = WaitlistFlow(client)
    assert await second.submit_email("ada@example.com") is True
    assert second.entry_id == first.entry_id


@pytest.mark.asyncio
async def test_details_validated_locally(client):
    flow = WaitlistFlow(client)
    await flow.submit_email("ada@example.com")

    assert await flow.submit_details({**DETAILS, "country": "Other", "city": ""}) is False
    assert flow.errors == {
        "city": ["City is required"],
        "customCountry": ["Please specify your country"],
    }
    assert flow.step == FormStep.DETAILS


@pytest.mark.asyncio
async def test_details_before_email_is_rejected(client):
    with pytest.raises(WaitlistFlowError) as exc_info:
        await WaitlistFlow(client).submit_details(DETAILS)
    assert exc_info.value.code == "INVALID_STEP"


@pytest.mark.asyncio
async def test_back_and_reset(client):
    flow = WaitlistFlow(client)
    await flow.submit_email("ada@example.com")

    flow.back()
    assert flow.step == FormStep.EMAIL
    assert flow.email == "ada@example.com"

    flow.reset()
    assert flow.entry_id is None
    assert flow.email is None


@pytest.mark.asyncio
async def test_unexpected_status_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            503, json={"success": False, "error": {"code": "UNAVAILABLE", "message": "Down"}}
        )

    async with httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url="http://testserver"
    ) as mock_client:
        with pytest.raises(WaitlistFlowError) as exc_info:
            await WaitlistFlow(mock_client).submit_email("ada@example.com")

    assert exc_info.value.status_code == 503
    assert exc_info.value.code == "UNAVAILABLE"
    assert exc_info.value.message == "Down"


@pytest.mark.asyncio
async def test_server_side_detail_errors_are_surfaced():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "POST":
            return httpx.Response(
                201, json={"success": True, "data": {"id": "abc", "email": "ada@example.com"}}
            )
        return httpx.Response(
            422,
            json={
                "success": False,
                "error": {
                    "code": "VALIDATION_ERROR",
                    "message": "Invalid input.",
                    "details": {"phoneNumber": ["Please enter a valid phone number"]},
                },
            },
        )

    async with httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url="http://testserver"
    ) as mock_client:
        flow = WaitlistFlow(mock_client)
        await flow.submit_email("ada@example.com")
        assert await flow.submit_details(DETAILS) is False

    assert flow.errors == {"phoneNumber": ["Please enter a valid phone number"]}
    assert flow.step == FormStep.DETAILS
