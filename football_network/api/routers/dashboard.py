"""Dashboard statistics endpoint."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends

from football_network.api.dependencies import get_dispatcher, require_access
from football_network.api.responses import to_response
from football_network.application.common.dispatcher import Dispatcher
from football_network.application.dashboard.queries.get_dashboard_stats import (
    GetDashboardStatsQuery,
)

router = APIRouter(prefix="/api/v1/dashboard", tags=["dashboard"])


@router.get("/stats", dependencies=[Depends(require_access("dashboard", "view"))])
async def get_stats(
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    include_details: bool = False,
    dispatcher: Dispatcher = Depends(get_dispatcher),
):
    query = GetDashboardStatsQuery(
        start_date=start_date, end_date=end_date, include_details=include_details
    )
    return to_response(await dispatcher.send(query))
