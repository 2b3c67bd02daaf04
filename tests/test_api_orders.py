"""
tests.test_api_orders

End-to-end order retrieval over HTTP against the seeded test database.

Seed: order 1 and 3 belong to maria (client), order 2 to alex (client + admin).
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import httpx
import pytest
from fastapi import FastAPI

from dscommerce.db.models import OrderItemModel, OrderModel, UserModel
from dscommerce.orders.models import OrderStatus
from tests.factories import bearer, mint_token

MARIA = "maria@gmail.com"
ALEX = "alex@gmail.com"


@pytest.mark.asyncio
async def test_admin_gets_any_order_with_totals(client: httpx.AsyncClient) -> None:
    r = await client.get("/orders/1", headers=bearer(mint_token(ALEX)))

    assert r.status_code == 200
    body = r.json()
    assert body["id"] == 1
    assert body["moment"] == "2022-07-25T13:00:00Z"
    assert body["status"] == "PAID"
    assert body["client"] == {"id": 1, "name": "Maria Brown"}
    assert [item["name"] for item in body["items"]] == ["The Lord of the Rings", "Macbook Pro"]
    assert Decimal(body["items"][0]["subTotal"]) == Decimal("181.00")
    assert Decimal(body["total"]) == Decimal("1431.00")


@pytest.mark.asyncio
async def test_owner_gets_own_order(client: httpx.AsyncClient) -> None:
    r = await client.get("/orders/1", headers=bearer(mint_token(MARIA)))

    assert r.status_code == 200
    assert r.json()["items"][1]["name"] == "Macbook Pro"


@pytest.mark.asyncio
async def test_client_gets_forbidden_for_other_users_order(client: httpx.AsyncClient) -> None:
    r = await client.get("/orders/2", headers=bearer(mint_token(MARIA)))

    assert r.status_code == 403
    body = r.json()
    assert body["status"] == 403
    assert body["error"] == "Access denied. Should be self or admin"
    assert body["path"] == "/orders/2"
    assert "items" not in body


@pytest.mark.asyncio
@pytest.mark.parametrize("username", [ALEX, MARIA])
async def test_missing_order_is_not_found(client: httpx.AsyncClient, username: str) -> None:
    r = await client.get("/orders/100", headers=bearer(mint_token(username)))

    assert r.status_code == 404
    assert r.json()["status"] == 404


@pytest.mark.asyncio
async def test_tampered_token_is_unauthorized(client: httpx.AsyncClient) -> None:
    r = await client.get("/orders/1", headers=bearer(mint_token(ALEX) + "xpto"))

    assert r.status_code == 401
    assert r.headers["www-authenticate"] == "Bearer"


@pytest.mark.asyncio
async def test_token_signed_with_another_key_is_unauthorized(client: httpx.AsyncClient) -> None:
    token = mint_token(ALEX, secret="another-signing-key-0123456789abcdef")
    r = await client.get("/orders/1", headers=bearer(token))

    assert r.status_code == 401


@pytest.mark.asyncio
async def test_expired_token_is_unauthorized(client: httpx.AsyncClient) -> None:
    r = await client.get("/orders/1", headers=bearer(mint_token(ALEX, ttl_seconds=-60)))

    assert r.status_code == 401


@pytest.mark.asyncio
async def test_missing_token_is_unauthorized(client: httpx.AsyncClient) -> None:
    r = await client.get("/orders/1")

    assert r.status_code == 401


@pytest.mark.asyncio
async def test_valid_token_for_unknown_user_is_unauthorized(client: httpx.AsyncClient) -> None:
    r = await client.get("/orders/1", headers=bearer(mint_token("ghost@gmail.com")))

    assert r.status_code == 401


@pytest.mark.asyncio
async def test_token_without_username_claim_is_unauthorized(client: httpx.AsyncClient) -> None:
    r = await client.get("/orders/1", headers=bearer(mint_token(None)))

    assert r.status_code == 401


@pytest.mark.asyncio
async def test_request_id_is_echoed(client: httpx.AsyncClient) -> None:
    r = await client.get("/healthz", headers={"x-request-id": "req-123"})

    assert r.status_code == 200
    assert r.headers["x-request-id"] == "req-123"


@pytest.mark.asyncio
async def test_readiness_probe_checks_database(client: httpx.AsyncClient) -> None:
    r = await client.get("/readyz")

    assert r.status_code == 200
    assert r.json()["status"] == "ready"


@pytest.mark.asyncio
async def test_owner_without_roles_cannot_read_own_order(
    app: FastAPI, client: httpx.AsyncClient
) -> None:
    async with app.state.sessionmaker() as session:
        owner = UserModel(
            id=50, name="No Roles", email="noroles@gmail.com", password="x", roles=[]
        )
        session.add(owner)
        session.add(
            OrderModel(
                id=50,
                moment=datetime(2022, 9, 1, 10, 0),
                status=OrderStatus.paid,
                client=owner,
                items=[OrderItemModel(product_id=1, quantity=1, price=Decimal("90.50"))],
            )
        )
        await session.commit()

    r = await client.get("/orders/50", headers=bearer(mint_token("noroles@gmail.com")))

    assert r.status_code == 401
    assert "items" not in r.json()
