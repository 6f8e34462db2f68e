"""Lookup orchestration.

Chat commands, refreshes and the terminal CLI all go through these two
pipelines so the resolution/fetch order lives in one place.
"""

from __future__ import annotations

import logging

from core.domain.models import DEFAULT_SERVER_PORT, GameStatus, ServerStatus
from core.interfaces.fetchers import GameStatusFetcher, ServerStatusFetcher
from core.services.resolver import IdentifierResolver

logger = logging.getLogger(__name__)


def parse_server_address(raw: str, default_port: int = DEFAULT_SERVER_PORT) -> tuple[str, int]:
    """Split ``host[:port]``.

    Anything that is not a single trailing numeric port in 1..65535 is kept
    as part of the host (bare IPv6 literals included).
    """

    value = raw.strip()
    host, sep, port_text = value.rpartition(":")
    if sep and host and ":" not in host and port_text.isdigit():
        port = int(port_text)
        if 1 <= port <= 65535:
            return host, port
    return value, default_port


class GameLookupPipeline:
    """Resolver, then the game fetcher (with its own fallback chain)."""

    def __init__(self, *, resolver: IdentifierResolver, fetcher: GameStatusFetcher) -> None:
        self._resolver = resolver
        self._fetcher = fetcher

    async def run(self, token: str) -> GameStatus | None:
        resolution = await self._resolver.resolve(token)
        return await self._fetcher.fetch(resolution)


class ServerLookupPipeline:
    """No alias or resolution step: address straight to the fetcher."""

    def __init__(self, *, fetcher: ServerStatusFetcher, default_port: int = DEFAULT_SERVER_PORT) -> None:
        self._fetcher = fetcher
        self._default_port = default_port

    async def run(self, address: str) -> ServerStatus | None:
        host, port = parse_server_address(address, self._default_port)
        if not host:
            logger.info("Empty server address")
            return None
        return await self._fetcher.fetch(host, port)
