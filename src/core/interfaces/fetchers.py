"""Upstream lookup contracts.

- Every method is async because implementations do HTTP.
- Failures are never raised through these contracts: "nothing usable" is
  `None`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import GameStatus, Resolution, ServerStatus


@runtime_checkable
class UniverseLookup(Protocol):
    async def universe_id_for(self, identifier: str) -> str | None:
        """Map a place-style ID to its universe-style ID, or `None`."""

        ...


@runtime_checkable
class GameStatusFetcher(Protocol):
    async def fetch(self, resolution: Resolution) -> GameStatus | None:
        """Fetch and normalize game status, walking the fallback chain."""

        ...


@runtime_checkable
class ServerStatusFetcher(Protocol):
    async def fetch(self, host: str, port: int = 25565) -> ServerStatus | None:
        """Fetch server status; `None` when offline or unreachable."""

        ...
