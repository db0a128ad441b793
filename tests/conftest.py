"""Pytest configuration and shared fixtures."""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from optiontheta.config import Settings
from optiontheta.db.session import DatabaseManager, get_session
from optiontheta.main import create_app

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def app_settings() -> Settings:
    """Settings pointing at an in-memory database."""
    return Settings(database_url=TEST_DATABASE_URL, environment="test", log_level="DEBUG")


@pytest.fixture
async def test_db() -> AsyncGenerator[DatabaseManager, None]:
    """Create a test database with in-memory SQLite."""
    db_manager = DatabaseManager(TEST_DATABASE_URL, echo=False)

    await db_manager.create_tables()

    yield db_manager

    await db_manager.drop_tables()
    await db_manager.close()


@pytest.fixture
async def db_session(test_db: DatabaseManager) -> AsyncGenerator[AsyncSession, None]:
    """Provide a database session for tests."""
    async for session in test_db.get_session():
        yield session


@pytest.fixture
def app(app_settings: Settings, test_db: DatabaseManager) -> FastAPI:
    """Application whose request sessions come from the in-memory test database."""
    application = create_app(app_settings)

    async def override_get_session():
        async for session in test_db.get_session():
            yield session

    application.dependency_overrides[get_session] = override_get_session
    return application


@pytest.fixture
async def api_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to the ASGI app; no network is involved."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def base_position_payload() -> dict[str, Any]:
    return {
        "symbol": "AAPL",
        "strategy_type": "covered_call",
        "underlying_price": 150.00,
        "notes": "Weekly calls against 100 shares",
    }


@pytest.fixture
def option_payload() -> dict[str, Any]:
    """Option leg body; ``base_position_id`` is filled in by each test."""
    return {
        "position_type": "new",
        "option_type": "call",
        "option_action": "sell",
        "strike_price": 155.00,
        "expiration_date": "2026-11-20",
        "contracts": 1,
        "premium_per_contract": 250.00,
        "fees_commissions": 0.65,
        "trade_date": "2026-10-16",
    }


@pytest.fixture
def stock_payload() -> dict[str, Any]:
    """Stock leg body; ``base_position_id`` is filled in by each test."""
    return {
        "action": "buy",
        "shares": 100,
        "share_price": 150.00,
        "fees_commissions": 0,
        "trade_date": "2026-10-16",
    }

