"""Dashboard routes."""

from fastapi import APIRouter, Depends

from ..dependencies import get_dashboard_service
from ..schemas.dashboard import DashboardOverview
from ..services.dashboard import DashboardService

router = APIRouter()


@router.get("/overview", response_model=DashboardOverview)
async def get_overview(
    service: DashboardService = Depends(get_dashboard_service),
) -> DashboardOverview:
    """Portfolio counters summed over every base position."""
    return await service.get_overview()
