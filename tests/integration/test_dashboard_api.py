"""Integration tests for the dashboard and health endpoints."""

from datetime import datetime

import pytest
from httpx import AsyncClient


async def create_position(api_client: AsyncClient, symbol: str) -> dict:
    response = await api_client.post(
        "/api/base-positions",
        json={"symbol": symbol, "strategy_type": "covered_call", "underlying_price": 100.00},
    )
    assert response.status_code == 201
    return response.json()


async def close_position(api_client: AsyncClient, position: dict) -> None:
    response = await api_client.put(
        f"/api/base-positions/{position['id']}",
        json={
            "symbol": position["symbol"],
            "position_name": position["position_name"],
            "strategy_type": position["strategy_type"],
            "underlying_price": position["underlying_price"],
            "position_status": "closed",
            "notes": position["notes"],
        },
    )
    assert response.status_code == 200


@pytest.mark.integration
@pytest.mark.asyncio
async def test_overview_with_no_positions(api_client: AsyncClient):
    response = await api_client.get("/api/dashboard/overview")

    assert response.status_code == 200
    assert response.json() == {
        "total_positions": 0,
        "open_positions": 0,
        "closed_positions": 0,
        "total_net_value": 0,
        "total_credits": 0,
        "total_debits": 0,
    }


@pytest.mark.integration
@pytest.mark.asyncio
async def test_overview_with_one_position(
    api_client: AsyncClient, option_payload: dict
):
    position = await create_position(api_client, "AAPL")
    await api_client.post("/api/options", json={**option_payload, "base_position_id": position["id"]})

    data = (await api_client.get("/api/dashboard/overview")).json()

    assert data["total_positions"] == 1
    assert data["open_positions"] == 1
    assert data["closed_positions"] == 0
    assert data["total_credits"] == pytest.approx(250.00)
    assert data["total_debits"] == pytest.approx(0.65)
    assert data["total_net_value"] == pytest.approx(249.35)


@pytest.mark.integration
@pytest.mark.asyncio
async def test_overview_sums_open_and_closed_positions(
    api_client: AsyncClient, option_payload: dict, stock_payload: dict
):
    aapl = await create_position(api_client, "AAPL")
    msft = await create_position(api_client, "MSFT")
    tsla = await create_position(api_client, "TSLA")
    await api_client.post("/api/options", json={**option_payload, "base_position_id": aapl["id"]})
    await api_client.post("/api/stocks", json={**stock_payload, "base_position_id": msft["id"]})
    await close_position(api_client, tsla)

    data = (await api_client.get("/api/dashboard/overview")).json()

    assert data["total_positions"] == 3
    assert data["open_positions"] == 2
    assert data["closed_positions"] == 1
    assert data["open_positions"] + data["closed_positions"] == data["total_positions"]
    assert data["total_credits"] == pytest.approx(250.00)
    assert data["total_debits"] == pytest.approx(15000.65)
    assert data["total_net_value"] == pytest.approx(-14750.65)
    assert data["total_net_value"] == pytest.approx(data["total_credits"] - data["total_debits"])


@pytest.mark.integration
@pytest.mark.asyncio
async def test_health(api_client: AsyncClient):
    response = await api_client.get("/api/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "OK"
    assert data["timestamp"].endswith("Z")
    datetime.fromisoformat(data["timestamp"].replace("Z", "+00:00"))
