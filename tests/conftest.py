import json

import httpx
import pytest


def json_response(payload, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(payload).encode())


@pytest.fixture
def upstream():
    """Deterministic responder keyed by request path."""

    routes = {
        "/items": lambda request: json_response({"id": 1, "name": "widget"}),
        "/list": lambda request: json_response([1, 2, 3]),
        "/missing": lambda request: httpx.Response(404),
        "/broken": lambda request: httpx.Response(500),
        "/null": lambda request: httpx.Response(200, content=b"null"),
        "/number": lambda request: httpx.Response(200, content=b"42"),
        "/invalid": lambda request: httpx.Response(200, content=b"{invalid"),
        "/old": lambda request: httpx.Response(302, headers={"location": "/items"}),
    }

    def handler(request: httpx.Request) -> httpx.Response:
        route = routes.get(request.url.path)
        if route is None:
            return httpx.Response(404)
        return route(request)

    return httpx.MockTransport(handler)


@pytest.fixture
def unreachable():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Name or service not known", request=request)

    return httpx.MockTransport(handler)
