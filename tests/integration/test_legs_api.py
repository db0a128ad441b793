"""Integration tests for option and stock leg API endpoints."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from httpx import AsyncClient


def money(value) -> Decimal:
    return Decimal(str(value)).quantize(Decimal("0.01"))


@pytest.fixture
async def position(api_client: AsyncClient, base_position_payload: dict) -> dict:
    response = await api_client.post("/api/base-positions", json=base_position_payload)
    assert response.status_code == 201
    return response.json()


async def get_position(api_client: AsyncClient, position_id: int) -> dict:
    response = await api_client.get(f"/api/base-positions/{position_id}")
    assert response.status_code == 200
    return response.json()


# ----- Option legs -----


@pytest.mark.integration
@pytest.mark.asyncio
async def test_create_option(api_client: AsyncClient, position: dict, option_payload: dict):
    response = await api_client.post(
        "/api/options", json={**option_payload, "base_position_id": position["id"]}
    )

    assert response.status_code == 201
    data = response.json()
    assert data["base_position_id"] == position["id"]
    assert data["option_action"] == "sell"
    assert data["premium_per_contract"] == 250.0
    assert data["expiration_date"] == "2026-11-20"
    assert data["is_open"] is True


@pytest.mark.integration
@pytest.mark.asyncio
async def test_list_options_for_position_newest_first(
    api_client: AsyncClient, position: dict, option_payload: dict, base_position_payload: dict
):
    other = (await api_client.post("/api/base-positions", json=base_position_payload)).json()
    created = []
    for strike in (150.00, 160.00):
        response = await api_client.post(
            "/api/options",
            json={**option_payload, "strike_price": strike, "base_position_id": position["id"]},
        )
        created.append(response.json())
    await api_client.post("/api/options", json={**option_payload, "base_position_id": other["id"]})

    response = await api_client.get("/api/options", params={"base_position_id": position["id"]})

    assert response.status_code == 200
    data = response.json()
    assert [option["id"] for option in data] == [created[1]["id"], created[0]["id"]]

    everything = await api_client.get("/api/options")
    assert len(everything.json()) == 3


@pytest.mark.integration
@pytest.mark.asyncio
async def test_option_legs_maintain_position_totals(
    api_client: AsyncClient, position: dict, option_payload: dict
):
    sold = (
        await api_client.post(
            "/api/options", json={**option_payload, "base_position_id": position["id"]}
        )
    ).json()
    await api_client.post(
        "/api/options",
        json={
            **option_payload,
            "option_action": "buy",
            "premium_per_contract": 100.00,
            "fees_commissions": 0.65,
            "base_position_id": position["id"],
        },
    )

    data = await get_position(api_client, position["id"])
    assert money(data["total_credits"]) == Decimal("250.00")
    assert money(data["total_debits"]) == Decimal("101.30")
    assert money(data["net_position_value"]) == Decimal("148.70")

    await api_client.delete(f"/api/options/{sold['id']}")

    data = await get_position(api_client, position["id"])
    assert money(data["total_credits"]) == Decimal("0.00")
    assert money(data["total_debits"]) == Decimal("100.65")
    assert money(data["net_position_value"]) == Decimal("-100.65")


@pytest.mark.integration
@pytest.mark.asyncio
async def test_update_option(api_client: AsyncClient, position: dict, option_payload: dict):
    option = (
        await api_client.post(
            "/api/options", json={**option_payload, "base_position_id": position["id"]}
        )
    ).json()

    response = await api_client.put(
        f"/api/options/{option['id']}",
        json={**option_payload, "contracts": 2, "is_open": False},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["contracts"] == 2
    assert data["is_open"] is False
    assert data["base_position_id"] == position["id"]

    totals = await get_position(api_client, position["id"])
    assert money(totals["total_credits"]) == Decimal("500.00")


@pytest.mark.integration
@pytest.mark.asyncio
async def test_get_option(api_client: AsyncClient, position: dict, option_payload: dict):
    option = (
        await api_client.post(
            "/api/options", json={**option_payload, "base_position_id": position["id"]}
        )
    ).json()

    response = await api_client.get(f"/api/options/{option['id']}")

    assert response.status_code == 200
    assert response.json() == option


@pytest.mark.integration
@pytest.mark.asyncio
async def test_option_not_found(api_client: AsyncClient, option_payload: dict):
    get_response = await api_client.get("/api/options/999")
    put_response = await api_client.put(
        "/api/options/999", json={**option_payload, "is_open": True}
    )
    delete_response = await api_client.delete("/api/options/999")

    for response in (get_response, put_response, delete_response):
        assert response.status_code == 404
        assert response.json() == {"error": "Option not found"}


@pytest.mark.integration
@pytest.mark.asyncio
async def test_delete_option(api_client: AsyncClient, position: dict, option_payload: dict):
    option = (
        await api_client.post(
            "/api/options", json={**option_payload, "base_position_id": position["id"]}
        )
    ).json()

    response = await api_client.delete(f"/api/options/{option['id']}")

    assert response.status_code == 200
    assert response.json() == {"message": "Option deleted successfully"}
    assert (await api_client.get(f"/api/options/{option['id']}")).status_code == 404


@pytest.mark.integration
@pytest.mark.asyncio
async def test_create_option_rejects_invalid_body(api_client: AsyncClient, position: dict):
    response = await api_client.post(
        "/api/options",
        json={
            "base_position_id": position["id"],
            "position_type": "open",
            "option_type": "call",
            "option_action": "sell",
            "strike_price": 155.00,
            "expiration_date": "not-a-date",
            "contracts": 0,
            "premium_per_contract": 2.50,
            "trade_date": "2026-10-16",
        },
    )

    assert response.status_code == 422
    fields = {tuple(detail["loc"])[-1] for detail in response.json()["details"]}
    assert {"position_type", "expiration_date", "contracts"} <= fields


@pytest.mark.integration
@pytest.mark.asyncio
async def test_create_option_for_missing_position_fails(
    api_client: AsyncClient, option_payload: dict
):
    response = await api_client.post("/api/options", json={**option_payload, "base_position_id": 999})

    assert response.status_code == 500
    assert response.json() == {"error": "Server error"}
    assert (await api_client.get("/api/options")).json() == []


# ----- Stock legs -----


@pytest.mark.integration
@pytest.mark.asyncio
async def test_create_stock(api_client: AsyncClient, position: dict, stock_payload: dict):
    response = await api_client.post(
        "/api/stocks", json={**stock_payload, "base_position_id": position["id"]}
    )

    assert response.status_code == 201
    data = response.json()
    assert data["action"] == "buy"
    assert data["shares"] == 100
    assert data["share_price"] == 150.0

    totals = await get_position(api_client, position["id"])
    assert money(totals["total_debits"]) == Decimal("15000.00")
    assert money(totals["net_position_value"]) == Decimal("-15000.00")


@pytest.mark.integration
@pytest.mark.asyncio
async def test_list_stocks_for_position(
    api_client: AsyncClient, position: dict, stock_payload: dict
):
    first = (
        await api_client.post("/api/stocks", json={**stock_payload, "base_position_id": position["id"]})
    ).json()
    second = (
        await api_client.post(
            "/api/stocks",
            json={**stock_payload, "action": "sell", "base_position_id": position["id"]},
        )
    ).json()

    response = await api_client.get("/api/stocks", params={"base_position_id": position["id"]})

    assert response.status_code == 200
    assert [stock["id"] for stock in response.json()] == [second["id"], first["id"]]


@pytest.mark.integration
@pytest.mark.asyncio
async def test_update_and_delete_stock(
    api_client: AsyncClient, position: dict, stock_payload: dict
):
    stock = (
        await api_client.post("/api/stocks", json={**stock_payload, "base_position_id": position["id"]})
    ).json()

    response = await api_client.put(
        f"/api/stocks/{stock['id']}",
        json={**stock_payload, "shares": 200, "fees_commissions": 1.00},
    )

    assert response.status_code == 200
    assert response.json()["shares"] == 200
    totals = await get_position(api_client, position["id"])
    assert money(totals["total_debits"]) == Decimal("30001.00")

    response = await api_client.delete(f"/api/stocks/{stock['id']}")

    assert response.status_code == 200
    assert response.json() == {"message": "Stock position deleted successfully"}
    totals = await get_position(api_client, position["id"])
    assert money(totals["total_debits"]) == Decimal("0.00")
    assert totals["stocks"] == []


@pytest.mark.integration
@pytest.mark.asyncio
async def test_stock_not_found(api_client: AsyncClient, stock_payload: dict):
    get_response = await api_client.get("/api/stocks/999")
    put_response = await api_client.put("/api/stocks/999", json=stock_payload)
    delete_response = await api_client.delete("/api/stocks/999")

    for response in (get_response, put_response, delete_response):
        assert response.status_code == 404
        assert response.json() == {"error": "Stock position not found"}


@pytest.mark.integration
@pytest.mark.asyncio
async def test_create_stock_for_missing_position_fails(
    api_client: AsyncClient, stock_payload: dict
):
    response = await api_client.post("/api/stocks", json={**stock_payload, "base_position_id": 999})

    assert response.status_code == 500
    assert response.json() == {"error": "Server error"}


# ----- Shared leg behaviour -----


def parse_utc(value: str) -> datetime:
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    # SQLite hands timestamps back without an offset; they are stored as UTC
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)


@pytest.mark.integration
@pytest.mark.asyncio
async def test_leg_writes_keep_position_name(
    api_client: AsyncClient, position: dict, option_payload: dict, stock_payload: dict
):
    option = await api_client.post(
        "/api/options", json={**option_payload, "base_position_id": position["id"]}
    )
    stock = await api_client.post(
        "/api/stocks", json={**stock_payload, "base_position_id": position["id"]}
    )
    assert option.status_code == 201
    assert stock.status_code == 201

    refreshed = await get_position(api_client, position["id"])

    assert refreshed["position_name"] == position["position_name"]
    assert refreshed["symbol"] == position["symbol"]
    assert refreshed["strategy_type"] == position["strategy_type"]


@pytest.mark.integration
@pytest.mark.asyncio
async def test_created_at_is_stored_as_utc(
    api_client: AsyncClient, position: dict, option_payload: dict, stock_payload: dict
):
    before = datetime.now(timezone.utc) - timedelta(minutes=5)
    after = datetime.now(timezone.utc) + timedelta(minutes=5)

    option = await api_client.post(
        "/api/options", json={**option_payload, "base_position_id": position["id"]}
    )
    stock = await api_client.post(
        "/api/stocks", json={**stock_payload, "base_position_id": position["id"]}
    )
    assert option.status_code == 201, option.text
    assert stock.status_code == 201, stock.text

    fetched_option = (await api_client.get(f"/api/options/{option.json()['id']}")).json()
    fetched_position = await get_position(api_client, position["id"])
    for created_at in (
        position["created_at"],
        fetched_position["created_at"],
        option.json()["created_at"],
        fetched_option["created_at"],
        stock.json()["created_at"],
    ):
        assert before <= parse_utc(created_at) <= after


@pytest.mark.integration
@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/api/options", "/api/stocks"])
async def test_blank_base_position_filter_lists_every_leg(
    api_client: AsyncClient,
    position: dict,
    option_payload: dict,
    stock_payload: dict,
    path: str,
):
    await api_client.post("/api/options", json={**option_payload, "base_position_id": position["id"]})
    await api_client.post("/api/stocks", json={**stock_payload, "base_position_id": position["id"]})

    response = await api_client.get(f"{path}?base_position_id=")

    assert response.status_code == 200
    assert len(response.json()) == 1
    assert response.json()[0]["base_position_id"] == position["id"]


@pytest.mark.integration
@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/api/options", "/api/stocks"])
async def test_non_integer_base_position_filter_is_rejected(api_client: AsyncClient, path: str):
    response = await api_client.get(path, params={"base_position_id": "abc"})

    assert response.status_code == 422
    body = response.json()
    assert body["error"] == "Request validation failed."
    assert body["details"][0]["loc"] == ["query", "base_position_id"]
