"""
Pytest configuration and fixtures
"""
from __future__ import annotations

from typing import Any

import httpx
import pytest
import pytest_asyncio

from adapters.http_client import build_async_client
from adapters.remote_api_service import RemoteApiService
from core.config import AppSettings
from core.domain.session import Session
from core.services.remote_api import RemoteApi

BASE_URL = "https://taskie.test"


class FakeBackend:
    """In-memory Taskie backend served through `httpx.MockTransport`."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], dict[str, Any]] = {}
        self.requests: list[httpx.Request] = []

    def on(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        status: int = 200,
        content: bytes | None = None,
        exc: Exception | None = None,
    ) -> None:
        self.routes[(method, path)] = {"json": json, "status": status, "content": content, "exc": exc}

    def calls(self, method: str, path: str) -> int:
        return sum(1 for r in self.requests if r.method == method and r.url.path == path)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"message": "not found"})
        if route["exc"] is not None:
            raise route["exc"]
        if route["content"] is not None:
            return httpx.Response(route["status"], content=route["content"])
        return httpx.Response(route["status"], json=route["json"])

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def settings() -> AppSettings:
    """Test configuration isolated from any .env file"""
    return AppSettings(_env_file=None, base_url=BASE_URL, token="")


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def session() -> Session:
    return Session(token="secret-token")


@pytest_asyncio.fixture
async def api(settings, backend, session):
    async with build_async_client(settings, session=session, transport=backend.transport) as client:
        yield RemoteApi(RemoteApiService(client), session=session)
