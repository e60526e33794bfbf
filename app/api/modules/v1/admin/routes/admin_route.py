import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import StreamingResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.core.dependencies.auth import get_current_admin
from app.api.db.database import get_db
from app.api.modules.v1.admin.routes.docs.admin_route_docs import (
    export_custom_errors,
    export_custom_success,
    export_responses,
    stats_custom_errors,
    stats_custom_success,
    stats_responses,
)
from app.api.modules.v1.admin.service.admin_service import AdminService
from app.api.utils.response_payloads import success_response

router = APIRouter(
    prefix="/admin",
    tags=["Admin"],
    dependencies=[Depends(get_current_admin)],
)
logger = logging.getLogger("app")


@router.get("/stats", status_code=status.HTTP_200_OK, responses=stats_responses)  # type: ignore
async def get_stats(db: AsyncSession = Depends(get_db)):
    """Counters for the dashboard header."""
    stats = await AdminService(db).get_stats()
    return success_response(status.HTTP_200_OK, data=stats.model_dump())


get_stats._custom_errors = stats_custom_errors  # type: ignore
get_stats._custom_success = stats_custom_success  # type: ignore


@router.get("/export", status_code=status.HTTP_200_OK, responses=export_responses)  # type: ignore
async def export_entries(db: AsyncSession = Depends(get_db)):
    """
    Export every waitlist entry as a CSV attachment.

    Columns follow a fixed order with a header row; booleans are written as
    ``true``/``false`` and missing values as empty cells.
    """
    filename, content = await AdminService(db).export_csv()
    headers = {"Content-Disposition": f'attachment; filename="{filename}"'}

    return StreamingResponse(iter([content]), media_type="text/csv", headers=headers)


export_entries._custom_errors = export_custom_errors  # type: ignore
export_entries._custom_success = export_custom_success  # type: ignore
