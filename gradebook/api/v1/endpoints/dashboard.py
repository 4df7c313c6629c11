from typing import Any
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from gradebook.api import deps
from gradebook.services.stats_service import StatsService
from gradebook.schemas.stats import DashboardStats
from gradebook.schemas.responses import SuccessResponse

router = APIRouter()


@router.get(
    "/stats",
    response_model=SuccessResponse[DashboardStats],
    summary="Get Dashboard Statistics",
)
async def get_dashboard_stats(
    db: AsyncSession = Depends(deps.get_db)
) -> Any:
    """
    Student counts, program distribution, average GPA and the GPA histogram.

    Recomputed from the current students, courses and grades on every call.
    """
    return SuccessResponse(data=await StatsService.get_dashboard_stats(db))
