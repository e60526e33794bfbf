from typing import Any, Dict, List, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def success_response(status_code: int, data: Any = None) -> JSONResponse:
    """
    Create a standardized JSON response for successful requests.

    Args:
        status_code (int): HTTP status code to return (e.g. 200, 201).
        data (Any): Payload object, list or None.

    Returns:
        JSONResponse: Contains:
            - success: always True
            - data: payload (``null`` when nothing is returned)
    """

    response_data = {
        "success": True,
        "data": data,
    }

    return JSONResponse(status_code=status_code, content=jsonable_encoder(response_data))


def error_response(
    *,
    status_code: int,
    message: str,
    code: str = "ERROR",
    details: Optional[Dict[str, List[str]]] = None,
) -> JSONResponse:
    """
    Create a standardized JSON response for failed requests.

    Args:
        status_code (int): HTTP status code representing the error (e.g. 401, 404, 409, 422).
        message (str): High-level human-readable error description.
        code (str): Machine-readable error code (e.g. "VALIDATION_ERROR", "EMAIL_USED").
            Defaults to "ERROR".
        details (Optional[Dict[str, List[str]]]): Optional field-level errors
            in the form:
                {
                    "field_name": ["error message 1", "error message 2"],
                    ...
                }

    Returns:
        JSONResponse: Standard error structure:
            {
                "success": false,
                "error": {
                    "code": "<ERROR_CODE>",
                    "message": "<message>",
                    "details": {"field": ["error1", ...]}
                }
            }
        ``details`` is omitted when there are no field-level errors.
    """

    error: Dict[str, Any] = {"code": code, "message": message}
    if details:
        error["details"] = details

    response_data = {"success": False, "error": error}

    return JSONResponse(status_code=status_code, content=jsonable_encoder(response_data))
