"""
Pytest configuration and shared fixtures.

The client talks to an in-process FastAPI backend through
``httpx.ASGITransport``; ``RecordingTransport`` records every request and
can hold selected requests until a test releases them.
"""

from __future__ import annotations

import asyncio

import httpx
import pytest
import pytest_asyncio

from fake_backend import BackendState, create_app
from inventory_client.api.client import ApiClient
from inventory_client.core.config import Settings
from inventory_client.main import create_client
from inventory_client.services.entity_store import EntityStore
from inventory_client.services.resources import CATEGORIES, PRODUCTS, SELLERS
from inventory_client.services.session import Session


class RecordingTransport(httpx.AsyncBaseTransport):
    def __init__(self, inner: httpx.AsyncBaseTransport) -> None:
        self.inner = inner
        self.requests: list[tuple[str, str]] = []
        self._gates: list[tuple[str, str, asyncio.Event]] = []
        self.down = False
        self.held: list[tuple[str, str]] = []

    def hold(self, method: str, path: str) -> asyncio.Event:
        """Hold the response to the next matching request until the event is set.

        The backend has already handled the request when the hold starts, so a
        held GET carries the data as it was at request time.
        """
        gate = asyncio.Event()
        self._gates.append((method.upper(), path, gate))
        return gate

    def count(self, method: str | None = None, path: str | None = None) -> int:
        return sum(
            1
            for m, p in self.requests
            if (method is None or m == method.upper()) and (path is None or p == path)
        )

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        method, path = request.method, request.url.path
        self.requests.append((method, path))
        if self.down:
            raise httpx.ConnectError("backend unreachable", request=request)
        response = await self.inner.handle_async_request(request)
        for entry in list(self._gates):
            if entry[0] == method and entry[1] == path:
                self._gates.remove(entry)
                self.held.append((method, path))
                await entry[2].wait()
                break
        return response


@pytest.fixture
def backend() -> BackendState:
    return BackendState.seeded()


@pytest.fixture
def transport(backend: BackendState) -> RecordingTransport:
    return RecordingTransport(httpx.ASGITransport(app=create_app(backend)))


@pytest.fixture
def settings() -> Settings:
    return Settings(api_base_url="http://backend.test", request_timeout=5.0)


@pytest_asyncio.fixture
async def api(transport: RecordingTransport, settings: Settings):
    client = ApiClient(settings=settings, transport=transport)
    yield client
    await client.close()


@pytest.fixture
def products(api: ApiClient) -> EntityStore:
    return EntityStore(api, PRODUCTS)


@pytest.fixture
def categories(api: ApiClient) -> EntityStore:
    return EntityStore(api, CATEGORIES)


@pytest.fixture
def sellers(api: ApiClient) -> EntityStore:
    return EntityStore(api, SELLERS)


@pytest.fixture
def session() -> Session:
    return Session(username="admin")


@pytest_asyncio.fixture
async def client(transport: RecordingTransport, settings: Settings):
    inventory = create_client(settings, transport=transport)
    yield inventory
    await inventory.close()
