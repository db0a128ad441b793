"""Request and response schemas for the HTTP API."""

from .dashboard import DashboardOverview
from .health import HealthStatus
from .positions import (
    BasePositionCreate,
    BasePositionDetail,
    BasePositionRead,
    BasePositionSummary,
    BasePositionUpdate,
    MessageResponse,
    OptionPositionCreate,
    OptionPositionRead,
    OptionPositionUpdate,
    StockSharePositionCreate,
    StockSharePositionRead,
    StockSharePositionUpdate,
)

__all__ = [
    "BasePositionCreate",
    "BasePositionDetail",
    "BasePositionRead",
    "BasePositionSummary",
    "BasePositionUpdate",
    "DashboardOverview",
    "HealthStatus",
    "MessageResponse",
    "OptionPositionCreate",
    "OptionPositionRead",
    "OptionPositionUpdate",
    "StockSharePositionCreate",
    "StockSharePositionRead",
    "StockSharePositionUpdate",
]
