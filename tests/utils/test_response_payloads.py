import json
import uuid
from datetime import datetime, timezone

from app.api.utils import response_payloads


def _get_json(response):
    """Decode a Starlette/JSONResponse body into a Python dict."""
    # response.body is bytes
    return json.loads(response.body.decode())


def test_success_response_with_data():
    resp = response_payloads.success_response(201, {"id": 1})
    assert resp.status_code == 201
    body = _get_json(resp)
    assert body == {"success": True, "data": {"id": 1}}


def test_success_response_no_data_is_null():
    resp = response_payloads.success_response(200)
    body = _get_json(resp)
    assert body["success"] is True
    assert body["data"] is None


def test_success_response_encodes_uuid_and_datetime():
    entry_id = uuid.uuid4()
    moment = datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    body = _get_json(response_payloads.success_response(200, {"id": entry_id, "at": moment}))
    assert body["data"]["id"] == str(entry_id)
    assert body["data"]["at"].startswith("2025-01-02T03:04:05")


def test_error_response_without_details():
    resp = response_payloads.error_response(status_code=404, code="NOT_FOUND", message="Missing")
    assert resp.status_code == 404
    body = _get_json(resp)
    assert body == {"success": False, "error": {"code": "NOT_FOUND", "message": "Missing"}}


def test_error_response_with_details():
    resp = response_payloads.error_response(
        status_code=422,
        code="VALIDATION_ERROR",
        message="Invalid input.",
        details={"email": ["Email is required"]},
    )
    body = _get_json(resp)
    assert body["success"] is False
    assert body["error"]["details"] == {"email": ["Email is required"]}


def test_error_response_default_code():
    body = _get_json(response_payloads.error_response(status_code=400, message="Bad Request"))
    assert body["error"]["code"] == "ERROR"
    assert "details" not in body["error"]
