"""Stock-share leg repository for database operations."""

from __future__ import annotations

from typing import List, Optional

from ..db.models import StockSharePosition
from .base import BaseRepository


class StockSharePositionRepository(BaseRepository[StockSharePosition]):
    """Repository for StockSharePosition operations."""

    model = StockSharePosition

    async def get_all(self, base_position_id: Optional[int] = None) -> List[StockSharePosition]:
        """Get stock legs, optionally for one base position, newest first."""
        return await self.list_newest_first(base_position_id=base_position_id)
