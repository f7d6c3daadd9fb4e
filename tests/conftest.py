"""Shared test fixtures for courier_sdk.

Provides an in-process fake API (served through httpx.MockTransport) and a
factory for clients wired to it, so lifecycle tests run without sockets.
"""

import asyncio
import socket
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from courier_sdk import CourierClient

BASE_URL = "http://api.test"
MOCK = {"a": {"b": [3, 2, 1]}}


async def fake_api(request: httpx.Request) -> httpx.Response:
    """Route a request the way the fake API does.

    Routes:
        /ok            -> 200 {"ok": true}
        /echo          -> 200 {"echo": <query param "query" or null>}
        /number/<code> -> <code> with MOCK as body for 2xx, empty otherwise
        /false         -> 200 false
        /text          -> 200 plain text
        /sleep/<ms>    -> 200 {"ok": true} after sleeping <ms>
        /post          -> 200 echoing the JSON request body
    """
    path = request.url.path

    if path == "/ok":
        return httpx.Response(200, json={"ok": True})
    if path.startswith("/echo"):
        return httpx.Response(200, json={"echo": request.url.params.get("query")})
    if path.startswith("/number/"):
        status = int(path.removeprefix("/number/")[:3])
        if 200 <= status < 300 and status != 204:
            return httpx.Response(status, json=MOCK)
        return httpx.Response(status)
    if path == "/false":
        return httpx.Response(200, content=b"false")
    if path == "/text":
        return httpx.Response(200, text="definitely not json")
    if path.startswith("/sleep/"):
        await asyncio.sleep(int(path.rsplit("/", 1)[-1]) / 1000)
        return httpx.Response(200, json={"ok": True})
    if path == "/post":
        return httpx.Response(200, content=request.content or b"")
    return httpx.Response(404, text="Not Found")


@pytest.fixture
def make_client() -> Callable[..., CourierClient]:
    """Build a CourierClient backed by the fake API."""

    def _make(**kwargs: Any) -> CourierClient:
        handler = kwargs.pop("handler", fake_api)
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return CourierClient(kwargs.pop("base_url", BASE_URL), http_client=http_client, **kwargs)

    return _make


@pytest.fixture
def unused_port() -> int:
    """Return a local port nothing is listening on."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]
