"""Read-only portfolio aggregates over the base position table."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict

from sqlalchemy import case, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.models import BasePosition, PositionStatus


class DashboardRepository:
    """Computes portfolio counters from the stored base position totals."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def overview(self) -> Dict[str, Any]:
        """Aggregate every base position in a single statement.

        Returns:
            Position counts by status plus summed net value, credits and
            debits; all zero when the table is empty
        """
        statement = select(
            func.count(BasePosition.id).label("total_positions"),
            func.coalesce(
                func.sum(case((BasePosition.position_status == PositionStatus.OPEN, 1), else_=0)), 0
            ).label("open_positions"),
            func.coalesce(
                func.sum(case((BasePosition.position_status == PositionStatus.CLOSED, 1), else_=0)), 0
            ).label("closed_positions"),
            func.coalesce(func.sum(BasePosition.net_position_value), 0).label("total_net_value"),
            func.coalesce(func.sum(BasePosition.total_credits), 0).label("total_credits"),
            func.coalesce(func.sum(BasePosition.total_debits), 0).label("total_debits"),
        )
        result = await self.session.execute(statement)
        row = result.one()
        return {
            "total_positions": int(row.total_positions),
            "open_positions": int(row.open_positions),
            "closed_positions": int(row.closed_positions),
            "total_net_value": Decimal(str(row.total_net_value)),
            "total_credits": Decimal(str(row.total_credits)),
            "total_debits": Decimal(str(row.total_debits)),
        }
