import os
import tempfile
from pathlib import Path

# Settings are read at import time, so the environment is pinned before any app import
TEST_DB_PATH = Path(tempfile.gettempdir()) / "titleflow_test.db"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{TEST_DB_PATH}"
os.environ["USE_MOCK_API"] = "true"
os.environ["PROVIDER_API_KEY"] = "test-provider-key"
os.environ["PROVIDER_AUTH_SCHEME"] = "Bearer"
os.environ["INTERNAL_API_KEY"] = "test-internal-key"
os.environ["FULFILMENT_DELAY_SECONDS"] = "0"
os.environ["OTLP_ENDPOINT"] = ""

import httpx
import pytest

import main
from shared.config import settings
from shared.config.database import Base, engine
from shared.provider import ProviderClient, get_provider_client
from shared.security import limiter
from services.search_service.main import search_app
from services.order_service.main import order_app
from services.order_service.router import get_service_client
from services.order_service.fulfilment import fulfilment_scheduler
from services.proxy_service.main import proxy_app

TITLES_PATH = settings.PROVIDER_TITLES_PATH
ORDERS_PATH = f"{settings.PROVIDER_ENQUIRY_PATH}/orders"

SYDNEY_PROPERTY = {
    "id": "test_nsw_01",
    "full_address": "1 Test Street, Sydney NSW 2000",
    "street": "1 Test Street",
    "suburb": "Sydney",
    "state": "NSW",
    "postcode": "2000",
    "lot_plan": "1//DP111111",
    "title_reference": "1/DP111111",
}


class FakeProvider:
    """httpx.MockTransport handler standing in for the title-search provider."""

    def __init__(self):
        self.routes = {}
        self.requests = []

    def on(self, method: str, path: str, status_code: int = 200, **response_kwargs):
        self.routes[(method, path)] = (status_code, response_kwargs)

    def fail(self, method: str, path: str, error: Exception):
        self.routes[(method, path)] = error

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        outcome = self.routes.get((request.method, request.url.path))
        if outcome is None:
            return httpx.Response(404, json={"title": "Not Found", "status": 404})
        if isinstance(outcome, Exception):
            raise outcome
        status_code, kwargs = outcome
        return httpx.Response(status_code, **kwargs)


@pytest.fixture
async def database():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    limiter.reset()
    yield
    await fulfilment_scheduler.drain()
    await engine.dispose()


@pytest.fixture
def fake_provider():
    fake = FakeProvider()
    provider = ProviderClient(transport=httpx.MockTransport(fake))
    apps = (search_app, order_app, proxy_app)
    for app in apps:
        app.dependency_overrides[get_provider_client] = lambda: provider
    yield fake
    for app in apps:
        app.dependency_overrides.pop(get_provider_client, None)


@pytest.fixture
def live_mode(monkeypatch):
    monkeypatch.setattr(settings, "USE_MOCK_API", False)


@pytest.fixture
async def client(database, monkeypatch):
    """ASGI client; checkout's calls to the cart service are routed back into the same app."""
    monkeypatch.setattr(settings, "CART_URL", "http://testserver/carts")

    async def service_client():
        transport = httpx.ASGITransport(app=main.app)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as c:
            yield c

    order_app.dependency_overrides[get_service_client] = service_client
    transport = httpx.ASGITransport(app=main.app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c
    order_app.dependency_overrides.pop(get_service_client, None)


@pytest.fixture
async def cart(client):
    resp = await client.post("/carts/")
    assert resp.status_code == 200
    return resp.json()


async def add_to_cart(client, session_id: str, document_id: str, prop: dict = None):
    resp = await client.post(
        f"/carts/{session_id}/items",
        json={"property": prop or SYDNEY_PROPERTY, "document_id": document_id},
    )
    assert resp.status_code == 200, resp.text
    return resp.json()
