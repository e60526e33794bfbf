import logging
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException

from app.api.utils.response_payloads import error_response

logger = logging.getLogger("app")


class AppError(Exception):
    """
    Base class for errors surfaced to API callers.

    Attributes:
        status_code: HTTP status code returned to the caller.
        code: Stable machine-readable error code.
        message: Human-readable description.
        details: Optional field-level errors keyed by field name.
    """

    status_code: int = 500
    code: str = "INTERNAL_SERVER_ERROR"

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, List[str]]] = None,
        code: Optional[str] = None,
    ):
        self.message = message
        self.details = details
        if code is not None:
            self.code = code
        super().__init__(message)


class InputValidationError(AppError):
    """Raised when input is malformed or incomplete. User-correctable."""

    status_code = 422
    code = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str = "Invalid input.",
        details: Optional[Dict[str, List[str]]] = None,
    ):
        super().__init__(message, details=details)


class NotFoundError(AppError):
    """Raised when an identifier does not resolve to a record."""

    status_code = 404
    code = "NOT_FOUND"


class ConflictError(AppError):
    """Raised when a unique resource is already claimed."""

    status_code = 409
    code = "EMAIL_USED"


class AuthError(AppError):
    """Raised on bad credentials or a missing/invalid bearer token."""

    status_code = 401
    code = "INVALID_CREDENTIALS"


class RateLimitExceeded(AppError):
    """
    Custom exception for rate limit violations.

    Attributes:
        retry_after: Number of seconds until the rate limit resets
    """

    status_code = 429
    code = "RATE_LIMIT_EXCEEDED"

    def __init__(self, retry_after: int = 3600, message: str = "Rate limit exceeded"):
        self.retry_after = retry_after
        super().__init__(message)


async def app_error_handler(request: Request, exc: AppError):
    """
    Handle domain errors and return a standardized JSON response.

    Args:
        request (Request): The incoming HTTP request.
        exc (AppError): The domain error raised by a service or dependency.

    Returns:
        JSONResponse: Error envelope carrying the error's code, message and details.
    """
    logger.warning(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")

    response = error_response(
        status_code=exc.status_code,
        code=exc.code,
        message=exc.message,
        details=exc.details,
    )

    if isinstance(exc, RateLimitExceeded):
        response.headers["Retry-After"] = str(exc.retry_after)

    return response


def format_validation_errors(
    errors: Iterable[Mapping[str, Any]],
    key_for: Callable[[Any], str] = str,
) -> Dict[str, List[str]]:
    """Group pydantic error dicts by the last element of their location."""
    details: Dict[str, List[str]] = {}
    for err in errors:
        loc = err.get("loc") or ("body",)
        field = key_for(loc[-1])
        msg = err["msg"]
        if msg.startswith("Value error,"):
            msg = msg.replace("Value error,", "").strip()
        details.setdefault(field, []).append(msg)
    return details


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Handle Pydantic request validation errors and return a standardized JSON response.

    Every failure is collected, keyed by the last element of its location.

    Args:
        request (Request): The incoming HTTP request.
        exc (RequestValidationError): The validation error raised by FastAPI/Pydantic.

    Returns:
        JSONResponse: Standardized error response containing field-level validation messages.
    """
    return error_response(
        status_code=422,
        code="VALIDATION_ERROR",
        message="Invalid input.",
        details=format_validation_errors(exc.errors()),
    )


HTTP_ERROR_CODES = {
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}


async def http_exception_handler(request: Request, exc: HTTPException):
    """
    Handle HTTP exceptions (4xx/5xx) and return a standardized JSON response.

    Args:
        request (Request): The incoming HTTP request.
        exc (HTTPException): The HTTP exception raised by FastAPI.

    Returns:
        JSONResponse: Standardized error response with HTTP status code and message.
    """
    logger.error(f"HTTP exception: {exc.detail} ({exc.status_code})")

    return error_response(
        status_code=exc.status_code,
        code=HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR"),
        message=str(exc.detail),
    )


async def general_exception_handler(request: Request, exc: Exception):
    """
    Handle uncaught exceptions and return a standardized JSON response.

    Args:
        request (Request): The incoming HTTP request.
        exc (Exception): The unhandled exception.

    Returns:
        JSONResponse: Standardized 500 error response.
    """
    logger.exception(f"Unhandled exception: {exc}")

    return error_response(
        status_code=500,
        code="INTERNAL_SERVER_ERROR",
        message="Internal server error",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the standard error handlers to an application."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
