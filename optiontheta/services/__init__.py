"""Service layer for positions, totals and dashboard aggregates."""

from .dashboard import DashboardService
from .positions import PositionService, build_position_name
from .totals import LegTotals, compute_leg_totals

__all__ = [
    "DashboardService",
    "LegTotals",
    "PositionService",
    "build_position_name",
    "compute_leg_totals",
]
