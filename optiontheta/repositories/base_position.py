"""Base position repository for database operations."""

from __future__ import annotations

from typing import List, Tuple

from sqlalchemy import delete, desc, func, select

from ..db.models import BasePosition, OptionPosition, StockSharePosition
from .base import BaseRepository


class BasePositionRepository(BaseRepository[BasePosition]):
    """Repository for BasePosition operations."""

    model = BasePosition

    async def list_with_leg_counts(self) -> List[Tuple[BasePosition, int, int]]:
        """Get every base position with its option and stock leg counts.

        Counts come from correlated sub-queries so the two leg tables never
        multiply each other's rows.

        Returns:
            ``(position, option_count, stock_count)`` tuples, newest first
        """
        option_count = (
            select(func.count(OptionPosition.id))
            .where(OptionPosition.base_position_id == BasePosition.id)
            .correlate(BasePosition)
            .scalar_subquery()
        )
        stock_count = (
            select(func.count(StockSharePosition.id))
            .where(StockSharePosition.base_position_id == BasePosition.id)
            .correlate(BasePosition)
            .scalar_subquery()
        )
        statement = select(
            BasePosition,
            option_count.label("option_count"),
            stock_count.label("stock_count"),
        ).order_by(desc(BasePosition.created_at), desc(BasePosition.id))
        result = await self.session.execute(statement)
        return [(position, int(options), int(stocks)) for position, options, stocks in result.all()]

    async def delete_with_legs(self, position_id: int) -> bool:
        """Delete a base position together with all of its legs.

        Args:
            position_id: The base position ID

        Returns:
            True if the base position existed and was deleted
        """
        await self.session.execute(
            delete(OptionPosition).where(OptionPosition.base_position_id == position_id)
        )
        await self.session.execute(
            delete(StockSharePosition).where(StockSharePosition.base_position_id == position_id)
        )
        result = await self.session.execute(
            delete(BasePosition).where(BasePosition.id == position_id)
        )
        return result.rowcount > 0
