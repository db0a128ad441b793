"""Repository layer for database access."""

from __future__ import annotations

from .base import BaseRepository
from .base_position import BasePositionRepository
from .dashboard import DashboardRepository
from .option_position import OptionPositionRepository
from .stock_share_position import StockSharePositionRepository

__all__ = [
    "BasePositionRepository",
    "BaseRepository",
    "DashboardRepository",
    "OptionPositionRepository",
    "StockSharePositionRepository",
]
