"""Shared test fixtures — a recording mock transport and clients built on it."""

from __future__ import annotations

import httpx
import pytest

from kraken_public import KrakenClient

from payloads import ROUTES, UNKNOWN_PAIR


class Recorder:
    """MockTransport handler that answers by endpoint name and keeps every request."""

    def __init__(self, routes: dict[str, str] | None = None, status: int = 200):
        self.routes = {**ROUTES, **(routes or {})}
        self.status = status
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        endpoint = request.url.path.rsplit("/", 1)[-1]
        return httpx.Response(self.status, text=self.routes.get(endpoint, UNKNOWN_PAIR))

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def make_recorder():
    """Build a ``Recorder``; *routes* override the default canned responses."""
    return Recorder


@pytest.fixture
def make_client():
    """Build a client whose requests go to *handler* instead of the network."""
    clients: list[KrakenClient] = []

    def _make(handler) -> KrakenClient:
        c = KrakenClient(base_url="https://api.test", transport=httpx.MockTransport(handler))
        clients.append(c)
        return c

    yield _make
    for c in clients:
        c.close()


@pytest.fixture
def recorder(make_recorder):
    return make_recorder()


@pytest.fixture
def client(make_client, recorder):
    return make_client(recorder)
