"""
Analytics Endpoints.

Admin-only reports computed from bookings and expenses.
"""

import datetime as dt

from fastapi import APIRouter, Depends, Query

from pinknail.core.models.domain import ReportGrouping
from pinknail.core.models.io import ProfitReport
from pinknail.server.core.security import get_current_admin
from pinknail.server.services.deps import AnalyticsServiceDep

router = APIRouter(tags=["analytics"], dependencies=[Depends(get_current_admin)])


@router.get(
    "/profit",
    response_model=ProfitReport,
    summary="Get Profit Report",
    description="Revenue from completed bookings minus expenses over an inclusive date range.",
    responses={400: {"description": "startDate is after endDate"}},
)
async def get_profit_report(
    service: AnalyticsServiceDep,
    start_date: dt.date = Query(alias="startDate"),
    end_date: dt.date = Query(alias="endDate"),
    group_by: ReportGrouping = Query(default=ReportGrouping.day, alias="groupBy"),
) -> ProfitReport:
    """
    Build the profit report.

    - **groupBy**: day (YYYY-MM-DD), week (YYYY-Www, Sunday-start weeks) or month (YYYY-MM) chart buckets.
    """
    return await service.profit_report(start_date, end_date, group_by)
