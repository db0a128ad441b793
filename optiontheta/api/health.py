"""Health related API routes."""

from datetime import datetime, timezone

from fastapi import APIRouter

from ..schemas.health import HealthStatus

router = APIRouter()


@router.get("/health", response_model=HealthStatus)
async def get_health() -> HealthStatus:
    return HealthStatus(
        status="OK",
        timestamp=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
    )
