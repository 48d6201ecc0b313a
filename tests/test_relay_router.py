import httpx
import pytest
from fastapi.testclient import TestClient

from main import app
from api.routers import relay_router
from app.relay.service import RelayService


@pytest.fixture
def client(monkeypatch, upstream):
    monkeypatch.setenv("UPSTREAM_API_URL", "http://upstream.test")
    monkeypatch.setattr(relay_router, "get_relay_service", lambda: RelayService(transport=upstream))
    return TestClient(app)


def test_relay_returns_upstream_payload(client) -> None:
    response = client.get("/relay/items")

    assert response.status_code == 200
    assert response.json() == {"status": "success", "data": {"id": 1, "name": "widget"}}


def test_relay_maps_upstream_status(client) -> None:
    response = client.get("/relay/missing")

    assert response.status_code == 404
    assert response.json() == {
        "message": "Failed to fetch with status 404 and message Not Found",
        "status": 404,
    }


def test_relay_maps_shape_mismatch_to_bad_gateway(client) -> None:
    response = client.get("/relay/null")

    assert response.status_code == 502
    assert response.json()["message"] == "Failed to parse response to the expected type"


def test_relay_without_upstream_configured(monkeypatch) -> None:
    monkeypatch.delenv("UPSTREAM_API_URL", raising=False)

    response = TestClient(app).get("/relay/items")

    assert response.status_code == 500
    assert response.json() == {
        "message": "Missing required configuration: UPSTREAM_API_URL",
        "status": 500,
    }


def test_health() -> None:
    response = TestClient(app).get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_relay_forwards_repeated_query_keys(monkeypatch) -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["query"] = request.url.query
        return httpx.Response(200, json={"ok": True})

    transport = httpx.MockTransport(handler)
    monkeypatch.setenv("UPSTREAM_API_URL", "http://upstream.test")
    monkeypatch.setattr(relay_router, "get_relay_service", lambda: RelayService(transport=transport))

    response = TestClient(app).get("/relay/items?tag=a&tag=b")

    assert response.status_code == 200
    assert seen["query"] == b"tag=a&tag=b"
