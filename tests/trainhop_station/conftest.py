"""Shared fixtures for trainhop_station tests.

No network access: HTTP clients are driven by ``httpx.MockTransport``
routers or replaced with ``AsyncMock`` objects.
"""

from __future__ import annotations

import base64
import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

Route = Callable[[httpx.Request], httpx.Response]


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


class Router:
    """Tiny request router for ``httpx.MockTransport``.

    Routes are matched on ``host + path``; every handled request is
    recorded in :attr:`calls`.
    """

    def __init__(self) -> None:
        self.routes: dict[str, Route | httpx.Response] = {}
        self.calls: list[httpx.Request] = []

    def add(self, url: str, response: Route | httpx.Response) -> None:
        self.routes[url] = response

    def json(self, url: str, payload: Any, status: int = 200) -> None:
        self.add(url, httpx.Response(status, json=payload))

    def count(self, url: str) -> int:
        return sum(1 for r in self.calls if f"{r.url.host}{r.url.path}" == url)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        key = f"{request.url.host}{request.url.path}"
        route = self.routes.get(key)
        if route is None:
            return httpx.Response(404, json={"detail": f"no route for {key}"})
        if isinstance(route, httpx.Response):
            return route
        return route(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture()
def router() -> Router:
    return Router()


def _contents_payload(document: Any) -> dict[str, Any]:
    encoded = base64.b64encode(json.dumps(document).encode()).decode()
    wrapped = "\n".join(encoded[i : i + 60] for i in range(0, len(encoded), 60))
    return {"type": "file", "encoding": "base64", "content": wrapped + "\n"}


@pytest.fixture()
def contents_payload():
    """Build a GitHub contents-API body, base64 wrapped at 60 chars like the real API."""
    return _contents_payload
