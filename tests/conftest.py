import os

# Must be set before the app (and its engine) is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("TRACING_ENABLED", "false")

import httpx
import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from main import app
from shared.config.database import Base, get_db


@pytest.fixture
async def engine(tmp_path):
    # One file per test so concurrent sessions see the same data
    test_engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'b2b.db'}",
        connect_args={"timeout": 30},
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def product_payload():
    return {
        "name": "Industrial Gloves",
        "brand": "SafeHands",
        "category": "safety",
        "description": "Box of 100 nitrile gloves",
        "image": "https://img.example.com/gloves.png",
        "price": 10,
        "rating": 4.5,
        "minQty": 5,
        "mainQuantity": 100,
        "userEmail": "seller@example.com",
    }


@pytest.fixture
def create_product(client, product_payload):
    async def _create(**overrides):
        payload = {**product_payload, **overrides}
        resp = await client.post("/products", json=payload)
        assert resp.status_code == 200, resp.text
        return resp.json()["productId"]

    return _create


@pytest.fixture
def order_payload():
    def _payload(product_id, quantity, **overrides):
        payload = {
            "productId": product_id,
            "quantity": quantity,
            "buyerName": "Acme Retail",
            "buyerEmail": "buyer@acme.test",
            "phone": "+1-555-0100",
            "address": "1 Warehouse Way",
        }
        payload.update(overrides)
        return payload

    return _payload
