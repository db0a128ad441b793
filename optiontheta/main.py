"""FastAPI application bootstrap for the Option Theta IQ backend."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import get_api_router
from .config import Settings, get_settings
from .core.logging import configure_logging
from .db import get_db_manager, init_db
from .middleware import ErrorHandlingMiddleware, register_exception_handlers

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize the database manager on startup and dispose it on shutdown."""
    settings: Settings = app.state.settings
    configure_logging(settings.log_level, json_logs=settings.log_json)
    logger.info("Starting Option Theta IQ backend", environment=settings.environment)

    try:
        db_manager = init_db(settings)
        logger.info("Database initialized", backend="sqlite" if settings.is_sqlite else "postgresql")

        # Production schemas are managed by Alembic migrations
        if settings.create_tables_on_startup or settings.debug:
            await db_manager.create_tables()
            logger.info("Database tables created")
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        raise

    yield

    logger.info("Shutting down Option Theta IQ backend")
    try:
        await get_db_manager().close()
        logger.info("Database connections closed")
    except Exception as e:
        logger.error("Error closing database", error=str(e))


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Explicit settings; defaults to the cached environment settings
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        description="Tracks option and stock legs of trading positions and portfolio totals.",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(get_api_router())
    return app


app = create_app()


def run() -> None:  # pragma: no cover - manual execution helper
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "optiontheta.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":  # pragma: no cover - manual execution helper
    run()
