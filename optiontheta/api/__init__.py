"""API route definitions for the Option Theta IQ backend."""

from fastapi import APIRouter

from .base_positions import router as base_positions_router
from .dashboard import router as dashboard_router
from .health import router as health_router
from .options import router as options_router
from .stocks import router as stocks_router


def get_api_router() -> APIRouter:
    """Construct the ``/api`` router with all included endpoints."""
    api_router = APIRouter(prefix="/api")
    api_router.include_router(health_router, tags=["health"])
    api_router.include_router(
        base_positions_router, prefix="/base-positions", tags=["base-positions"]
    )
    api_router.include_router(options_router, prefix="/options", tags=["options"])
    api_router.include_router(stocks_router, prefix="/stocks", tags=["stocks"])
    api_router.include_router(dashboard_router, prefix="/dashboard", tags=["dashboard"])
    return api_router
