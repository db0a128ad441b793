"""Dashboard aggregation service."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from ..repositories import DashboardRepository
from ..schemas.dashboard import DashboardOverview


class DashboardService:
    """Read-only portfolio counters for the dashboard.

    Sums are taken over the totals stored on each base position; legs are
    not re-read here.
    """

    def __init__(self, session: AsyncSession):
        self.repository = DashboardRepository(session)

    async def get_overview(self) -> DashboardOverview:
        return DashboardOverview(**await self.repository.overview())
