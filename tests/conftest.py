"""Shared fixtures: an in-process exchange that records what it receives."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

TEST_SECRET = "c2VjcmV0"  # base64("secret")


class FakeExchange:
    """Minimal HTTP stand-in for the exchange REST API."""

    def __init__(self) -> None:
        self.requests: list[dict[str, Any]] = []
        self.responses: dict[str, tuple[int, Any]] = {}
        self.delay = 0.0
        self.endpoint = ""

    def respond(self, path: str, payload: Any, status: int = 200) -> None:
        self.responses[path] = (status, payload)

    async def handle(self, request: web.Request) -> web.Response:
        body = await request.read()
        self.requests.append(
            {
                "method": request.method,
                "path": request.path_qs,
                "headers": dict(request.headers),
                "body": body,
            }
        )
        if self.delay:
            await asyncio.sleep(self.delay)
        status, payload = self.responses.get(request.path, (200, []))
        if isinstance(payload, bytes):
            return web.Response(status=status, body=payload, content_type="application/json")
        if isinstance(payload, str):
            return web.Response(status=status, text=payload, content_type="text/html")
        return web.json_response(payload, status=status)


@pytest.fixture
async def exchange():
    state = FakeExchange()
    app = web.Application()
    app.router.add_route("*", "/{tail:.*}", state.handle)
    server = TestServer(app)
    await server.start_server()
    state.endpoint = str(server.make_url("/")).rstrip("/")
    yield state
    await server.close()


@pytest.fixture
def credentials() -> dict[str, str]:
    return {"key": "test-key", "secret": TEST_SECRET, "passphrase": "test-pass"}
