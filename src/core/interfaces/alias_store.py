"""Alias persistence contract."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class AliasStore(Protocol):
    """Durable mapping from a human-readable name to a game identifier."""

    def load(self) -> dict[str, str]:
        """Whole mapping; empty when missing or unreadable."""

        ...

    def save(self, name: str, identifier: str) -> None:
        """Insert or overwrite `name`. Durable once this returns."""

        ...

    def resolve(self, token: str) -> str:
        """Saved identifier for `token`, or `token` itself."""

        ...
