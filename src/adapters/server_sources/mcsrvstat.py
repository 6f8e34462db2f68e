"""Server source: mcsrvstat.us (Minecraft Java servers).

- One GET per lookup: `https://api.mcsrvstat.us/2/<host>:<port>`.
- `online: false` and transport failures both yield `None`; callers report
  "offline or unreachable" without telling them apart.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from adapters.http_client import build_async_client, fetch_json
from core.config import AppSettings
from core.domain.errors import UpstreamError
from core.domain.models import (
    DEFAULT_SERVER_MOTD,
    DEFAULT_SERVER_PORT,
    DEFAULT_SERVER_VERSION,
    ServerStatus,
)
from core.interfaces.fetchers import ServerStatusFetcher

logger = logging.getLogger(__name__)


def _count(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)) and value > 0:
        return int(value)
    return 0


def _clean_motd(motd: Any) -> str:
    if not isinstance(motd, dict):
        return DEFAULT_SERVER_MOTD
    lines = motd.get("clean")
    if not isinstance(lines, list):
        return DEFAULT_SERVER_MOTD
    text = "\n".join(line for line in lines if isinstance(line, str))
    return text if text.strip() else DEFAULT_SERVER_MOTD


class McSrvStatFetcher(ServerStatusFetcher):
    _base_url = "https://api.mcsrvstat.us"

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    def favicon_url_for(self, host: str) -> str:
        """Fallback icon endpoint, used when the API inlines image data."""

        return f"{self._base_url}/icon/{host}"

    async def fetch(self, host: str, port: int = DEFAULT_SERVER_PORT) -> ServerStatus | None:
        url = f"{self._base_url}/2/{host}:{port}"
        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                payload = await fetch_json(client, url)
        except UpstreamError as exc:
            logger.warning("Server status request failed for %s:%s: %s", host, port, exc)
            return None

        if not isinstance(payload, dict) or not payload.get("online"):
            logger.info("Server %s:%s reported offline", host, port)
            return None

        players = payload.get("players")
        if not isinstance(players, dict):
            players = {}

        version = payload.get("version")
        if not isinstance(version, str) or not version.strip():
            version = DEFAULT_SERVER_VERSION

        icon = payload.get("icon")
        if isinstance(icon, str) and icon and not icon.startswith("data:"):
            favicon_url = icon
        else:
            favicon_url = self.favicon_url_for(host)

        return ServerStatus(
            host=host,
            port=port,
            version=version,
            players_online=_count(players.get("online")),
            max_players=_count(players.get("max")),
            motd=_clean_motd(payload.get("motd")),
            favicon_url=favicon_url,
        )
