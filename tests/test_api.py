"""
tests.test_api

HTTP surface smoke tests.

Responsibilities:
- Ensure the FastAPI app boots and serves the key endpoints.
- Ensure engine errors surface as 422 with the error class name.
"""

from __future__ import annotations

import httpx
import pytest

from order_keys.api.app import create_app
from order_keys.settings import Settings


def _client() -> httpx.AsyncClient:
    app = create_app(settings=Settings(env="test", max_batch_size=10))
    transport = httpx.ASGITransport(app=app)
    return httpx.AsyncClient(transport=transport, base_url="http://test")


@pytest.mark.asyncio
async def test_health_endpoint() -> None:
    async with _client() as client:
        r = await client.get("/healthz")
        assert r.status_code == 200
        assert r.json()["status"] == "ok"
        assert r.headers["x-request-id"]


@pytest.mark.asyncio
async def test_between_endpoint() -> None:
    async with _client() as client:
        r = await client.post("/v1/keys/between", json={})
        assert r.status_code == 200
        assert r.json() == {"key": "a0"}

        r = await client.post("/v1/keys/between", json={"before": "a0", "after": "a1"})
        assert r.json() == {"key": "a0V"}


@pytest.mark.asyncio
async def test_batch_endpoint() -> None:
    async with _client() as client:
        r = await client.post("/v1/keys/batch", json={"count": 3})
        assert r.status_code == 200
        assert r.json() == {"keys": ["a0", "a1", "a2"]}

        r = await client.post("/v1/keys/batch", json={"count": 11})
        assert r.status_code == 422
        assert r.json() == {
            "detail": "count 11 exceeds max_batch_size 10",
            "error": "BatchTooLarge",
        }

        r = await client.post("/v1/keys/insert", json={"siblings": [], "index": 0, "count": 11})
        assert r.status_code == 422
        assert r.json()["error"] == "BatchTooLarge"

        r = await client.post("/v1/keys/batch", json={"count": -1})
        assert r.status_code == 422


@pytest.mark.asyncio
async def test_validate_endpoint() -> None:
    async with _client() as client:
        r = await client.post("/v1/keys/validate", json={"key": "a0V"})
        assert r.json() == {"key": "a0V", "valid": True, "reason": None}

        r = await client.post("/v1/keys/validate", json={"key": "a00"})
        body = r.json()
        assert body["valid"] is False
        assert "zero" in body["reason"]


@pytest.mark.asyncio
async def test_insert_and_move_endpoints() -> None:
    siblings = ["a0", "a1", "a2"]
    async with _client() as client:
        r = await client.post(
            "/v1/keys/insert", json={"siblings": siblings, "index": 1, "count": 2}
        )
        assert r.status_code == 200
        keys = r.json()["keys"]
        assert len(keys) == 2
        assert all("a0" < k < "a1" for k in keys)

        r = await client.post(
            "/v1/keys/move", json={"siblings": siblings, "from_index": 0, "to_index": 2}
        )
        assert r.status_code == 200
        assert r.json() == {"key": "a3"}


@pytest.mark.asyncio
async def test_engine_errors_map_to_422() -> None:
    async with _client() as client:
        r = await client.post("/v1/keys/between", json={"before": "a1", "after": "a0"})
        assert r.status_code == 422
        assert r.json()["error"] == "OrderViolation"

        r = await client.post("/v1/keys/between", json={"before": "b0"})
        assert r.status_code == 422
        assert r.json()["error"] == "InvalidKey"

        r = await client.post(
            "/v1/keys/move", json={"siblings": ["a0"], "from_index": 0, "to_index": 3}
        )
        assert r.status_code == 422
        assert r.json()["error"] == "SiblingIndexError"
