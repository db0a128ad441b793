"""Dependency providers wiring request sessions into the services."""

from typing import Optional

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import get_settings
from ..core.errors import ValidationError
from ..db.session import get_db_manager, get_session
from ..services.dashboard import DashboardService
from ..services.positions import PositionService


def get_position_service(session: AsyncSession = Depends(get_session)) -> PositionService:
    """Position service bound to the request's database session."""
    return PositionService(session)


def get_dashboard_service(session: AsyncSession = Depends(get_session)) -> DashboardService:
    return DashboardService(session)


def leg_owner_filter(
    base_position_id: Optional[str] = Query(None, description="Only legs of this base position"),
) -> Optional[int]:
    """The ``base_position_id`` leg filter; a blank value means no filter."""
    if base_position_id is None or not base_position_id.strip():
        return None
    try:
        return int(base_position_id)
    except ValueError:
        raise ValidationError(
            details=[
                {
                    "loc": ["query", "base_position_id"],
                    "msg": "Input should be a valid integer",
                    "type": "int_parsing",
                }
            ]
        ) from None


__all__ = [
    "get_dashboard_service",
    "get_db_manager",
    "get_position_service",
    "get_session",
    "get_settings",
    "leg_owner_filter",
]
