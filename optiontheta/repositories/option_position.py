"""Option leg repository for database operations."""

from __future__ import annotations

from typing import List, Optional

from ..db.models import OptionPosition
from .base import BaseRepository


class OptionPositionRepository(BaseRepository[OptionPosition]):
    """Repository for OptionPosition operations."""

    model = OptionPosition

    async def get_all(self, base_position_id: Optional[int] = None) -> List[OptionPosition]:
        """Get option legs, optionally for one base position, newest first."""
        return await self.list_newest_first(base_position_id=base_position_id)
