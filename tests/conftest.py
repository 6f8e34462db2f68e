"""Shared fixtures: isolated settings, fake upstreams, fake chat surfaces."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable
from unittest.mock import AsyncMock

import httpx
import pytest

from core.config import AppSettings
from core.domain.models import Card


class FakeUpstream:
    """Routes requests by ``host + path`` to canned responses.

    A route value may be JSON-able data (200), an ``int`` status code, an
    ``httpx.Response``, an exception instance (raised as a transport error)
    or a callable taking the request.
    """

    def __init__(self, routes: dict[str, Any] | None = None) -> None:
        self.routes: dict[str, Any] = dict(routes or {})
        self.requests: list[httpx.Request] = []

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = f"{request.url.host}{request.url.path}"
        if key not in self.routes:
            return httpx.Response(404, json={"errors": [{"message": "not found"}]})
        value = self.routes[key]
        if callable(value) and not isinstance(value, httpx.Response):
            value = value(request)
        if isinstance(value, Exception):
            raise value
        if isinstance(value, httpx.Response):
            return value
        if isinstance(value, int):
            return httpx.Response(value, json={})
        return httpx.Response(200, json=value)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)

    def hits(self, prefix: str) -> list[httpx.Request]:
        return [r for r in self.requests if f"{r.url.host}{r.url.path}".startswith(prefix)]


class FakeSurface:
    def __init__(self) -> None:
        self.replace = AsyncMock()
        self.notify = AsyncMock()
        self.disable_control = AsyncMock()


class FakeContext:
    """In-memory `CommandContext`."""

    def __init__(self, user_id: int = 42) -> None:
        self.user_id = user_id
        self.deferred = False
        self.sent: list[tuple[str, bool]] = []
        self.cards: list[Card] = []
        self.stream = None
        self.surface = FakeSurface()

    async def defer(self) -> None:
        self.deferred = True

    async def send(self, content: str, *, ephemeral: bool = False) -> None:
        self.sent.append((content, ephemeral))

    async def send_card(self, card: Card, stream):
        self.cards.append(card)
        self.stream = stream
        return self.surface


@pytest.fixture
def alias_path(tmp_path: Path) -> Path:
    return tmp_path / "saved_games.json"


@pytest.fixture
def settings(alias_path: Path) -> AppSettings:
    return AppSettings(_env_file=None, alias_store_path=alias_path, http_timeout_seconds=5)


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def make_context() -> Callable[..., FakeContext]:
    return FakeContext


@pytest.fixture
def surface() -> FakeSurface:
    return FakeSurface()
