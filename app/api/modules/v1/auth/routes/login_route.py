import logging

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.core.dependencies.auth import get_token_payload
from app.api.core.exceptions import AppError
from app.api.db.database import get_db
from app.api.modules.v1.auth.routes.docs.login_route_docs import (
    login_custom_errors,
    login_custom_success,
    login_responses,
    logout_custom_errors,
    logout_custom_success,
    logout_responses,
)
from app.api.modules.v1.auth.schemas.login import LoginRequest
from app.api.modules.v1.auth.service.login_service import LoginService, logout_admin
from app.api.utils.client_info import get_client_ip
from app.api.utils.response_payloads import error_response, success_response

router = APIRouter(prefix="/auth", tags=["Auth"])
logger = logging.getLogger("app")


@router.post(
    "/login",
    status_code=status.HTTP_200_OK,
    responses=login_responses,  # type: ignore
)
async def login(request: Request, login_data: LoginRequest, db: AsyncSession = Depends(get_db)):
    """
    Authenticate an administrator and issue a bearer token.

    Args:
        request (Request): The incoming HTTP request.
        login_data (LoginRequest): Username and password.
        db (AsyncSession, optional): Database session dependency.

    Returns:
        JSON response with success or error payload:
        - On success: token, token_type, expires_in
        - On failure: INVALID_CREDENTIALS, VALIDATION_ERROR or RATE_LIMIT_EXCEEDED
    """
    try:
        result = await LoginService(db).login(
            username=login_data.username,
            password=login_data.password,
            ip_address=get_client_ip(request),
        )
        return success_response(status_code=status.HTTP_200_OK, data=result)

    except AppError:
        raise
    except Exception:
        logger.exception("Unexpected error during login for username=%s", login_data.username)
        return error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            code="INTERNAL_SERVER_ERROR",
            message="Internal server error",
        )


login._custom_errors = login_custom_errors  # type: ignore
login._custom_success = login_custom_success  # type: ignore


@router.post(
    "/logout",
    status_code=status.HTTP_200_OK,
    responses=logout_responses,  # type: ignore
)
async def logout(payload: dict = Depends(get_token_payload)):
    """
    Revoke the bearer token used for this request.

    The token's ``jti`` is denylisted in Redis until the token would have expired.
    """
    if not await logout_admin(payload):
        return error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            code="INTERNAL_SERVER_ERROR",
            message="Logout failed. Please try again.",
        )

    logger.info(f"Administrator {payload.get('sub')} logged out")
    return success_response(status_code=status.HTTP_200_OK)


logout._custom_errors = logout_custom_errors  # type: ignore
logout._custom_success = logout_custom_success  # type: ignore
