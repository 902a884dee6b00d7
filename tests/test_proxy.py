import json

import httpx
import pytest

from conftest import ORDERS_PATH, TITLES_PATH


@pytest.mark.asyncio
async def test_search_requires_query(client):
    resp = await client.get("/api/search")
    assert resp.status_code == 400
    assert resp.json() == {"error": "Query parameter required"}


@pytest.mark.asyncio
async def test_search_forwards_parsed_address(client, fake_provider):
    fake_provider.on("POST", TITLES_PATH, json={"properties": []})

    resp = await client.get("/api/search", params={"q": "12 Smith St, Parramatta NSW 2150"})

    assert resp.status_code == 200
    assert resp.json() == {"properties": []}
    sent = fake_provider.requests[0]
    assert sent.url.params["state"] == "NSW"
    assert sent.headers["Authorization"] == "Bearer test-provider-key"
    assert json.loads(sent.content)["suburb"] == "Parramatta"


@pytest.mark.asyncio
async def test_search_relays_provider_error(client, fake_provider):
    fake_provider.on("POST", TITLES_PATH, status_code=401, text="bad key")

    resp = await client.get("/api/search", params={"q": "12 Smith St, Parramatta NSW 2150"})

    assert resp.status_code == 401
    assert resp.json() == {"error": "Provider Error: Unauthorized", "details": "bad key"}


@pytest.mark.asyncio
async def test_search_provider_unreachable(client, fake_provider):
    fake_provider.fail("POST", TITLES_PATH, httpx.ConnectError("refused"))

    resp = await client.get("/api/search", params={"q": "12 Smith St"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to connect to Property Provider"}


@pytest.mark.asyncio
async def test_order_forwards_body(client, fake_provider):
    fake_provider.on("POST", ORDERS_PATH, json={"orderId": 99})

    resp = await client.post("/api/order", json={"titleReference": "1/DP1"})

    assert resp.json() == {"orderId": 99}
    assert json.loads(fake_provider.requests[0].content) == {"titleReference": "1/DP1"}


@pytest.mark.asyncio
async def test_order_rejects_invalid_json(client, fake_provider):
    resp = await client.post("/api/order", content=b"not json", headers={"Content-Type": "application/json"})

    assert resp.status_code == 400
    assert fake_provider.requests == []


@pytest.mark.asyncio
async def test_order_provider_unreachable(client, fake_provider):
    fake_provider.fail("POST", ORDERS_PATH, httpx.ConnectError("refused"))

    resp = await client.post("/api/order", json={})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to place order"}


@pytest.mark.asyncio
async def test_status_requires_order_id(client):
    resp = await client.get("/api/status")
    assert resp.status_code == 400
    assert resp.json() == {"error": "Order ID required"}


@pytest.mark.asyncio
async def test_status_relays_provider_json(client, fake_provider):
    fake_provider.on("GET", f"{TITLES_PATH}/55", json={"status": "Complete"})

    resp = await client.get("/api/status", params={"orderId": "55"})

    assert resp.json() == {"status": "Complete"}


@pytest.mark.asyncio
async def test_status_relays_provider_status_code(client, fake_provider):
    fake_provider.on("GET", f"{TITLES_PATH}/56", status_code=404, text="missing")

    resp = await client.get("/api/status", params={"orderId": "56"})

    assert resp.status_code == 404
    assert resp.json() == {"error": "Not Found"}


@pytest.mark.asyncio
async def test_download_requires_order_id(client):
    resp = await client.get("/api/download")
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_download_defaults_headers(client, fake_provider):
    fake_provider.on("GET", f"{ORDERS_PATH}/12/download", content=b"bytes")

    resp = await client.get("/api/download", params={"orderId": "12"})

    assert resp.status_code == 200
    assert resp.content == b"bytes"
    assert resp.headers["content-type"] == "application/octet-stream"
    assert resp.headers["content-disposition"] == 'attachment; filename="document-12.pdf"'


@pytest.mark.asyncio
async def test_download_provider_error(client, fake_provider):
    fake_provider.on("GET", f"{ORDERS_PATH}/13/download", status_code=403, text="nope")

    resp = await client.get("/api/download", params={"orderId": "13"})

    assert resp.status_code == 403
    assert resp.json() == {"error": "Download failed"}


@pytest.mark.asyncio
async def test_search_non_json_reply_is_a_connection_failure(client, fake_provider):
    fake_provider.on("POST", TITLES_PATH, text="<html>gateway</html>")

    resp = await client.get("/api/search", params={"q": "12 Smith St, Parramatta NSW 2150"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to connect to Property Provider"}


@pytest.mark.asyncio
async def test_status_non_json_reply_is_a_server_error(client, fake_provider):
    fake_provider.on("GET", f"{TITLES_PATH}/57", text="<html>gateway</html>")

    resp = await client.get("/api/status", params={"orderId": "57"})

    assert resp.status_code == 500


@pytest.mark.asyncio
async def test_order_relays_provider_validation_errors(client, fake_provider):
    fake_provider.on("POST", ORDERS_PATH, status_code=422, json={"errors": ["titleReference required"]})

    resp = await client.post("/api/order", json={})

    assert resp.status_code == 422
    assert resp.json() == {"errors": ["titleReference required"]}


@pytest.mark.asyncio
async def test_order_non_json_error_reply(client, fake_provider):
    fake_provider.on("POST", ORDERS_PATH, status_code=503, text="upstream down")

    resp = await client.post("/api/order", json={})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to place order"}
