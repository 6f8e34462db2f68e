"""Domain exceptions.

Only `AliasStoreError` is meant to escape its adapter; `UpstreamError` is
always caught at the fetch boundary and turned into "no data".
"""

from __future__ import annotations


class GameStatusError(Exception):
    """Base class for every error raised by this project."""


class UpstreamError(GameStatusError):
    """Transport or parse failure while talking to a third-party API."""

    def __init__(self, message: str, *, url: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class AliasStoreError(GameStatusError):
    """The alias file could not be written."""
