"""Store failures surface as a generic 500 without driver details."""

from unittest.mock import AsyncMock

import httpx
import pytest
from bson import ObjectId
from sqlalchemy.exc import OperationalError

from main import app
from shared.config.database import get_db

_DRIVER_TEXT = "could not connect to server db-primary:5432"


@pytest.fixture
async def failing_client():
    session = AsyncMock()
    session.execute.side_effect = OperationalError("SELECT 1", {}, Exception(_DRIVER_TEXT))

    async def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


class TestStoreErrors:
    async def test_list_products(self, failing_client):
        resp = await failing_client.get("/products")
        assert resp.status_code == 500
        assert resp.json() == {"message": "Failed to fetch products"}
        assert _DRIVER_TEXT not in resp.text

    async def test_place_order(self, failing_client):
        resp = await failing_client.post(
            "/orders",
            json={
                "productId": str(ObjectId()),
                "quantity": 5,
                "buyerName": "Acme Retail",
                "buyerEmail": "buyer@acme.test",
            },
        )
        assert resp.status_code == 500
        assert resp.json() == {"message": "Failed to place order"}
        assert _DRIVER_TEXT not in resp.text

    async def test_update_product(self, failing_client):
        resp = await failing_client.put(f"/products/{ObjectId()}", json={"price": 3})
        assert resp.status_code == 500
        assert resp.json() == {"message": "Failed to update product"}
        assert "OperationalError" not in resp.text

    async def test_cancel_order(self, failing_client):
        resp = await failing_client.delete(f"/cart/{ObjectId()}")
        assert resp.status_code == 500
        assert resp.json() == {"message": "Failed to remove order"}
