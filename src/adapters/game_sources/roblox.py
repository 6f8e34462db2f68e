"""Game source: Roblox.

Four public JSON endpoints, no auth:
- place -> universe conversion (`apis.roblox.com`)
- game metadata by universe ID (`games.roblox.com`, primary)
- place details by place ID (`www.roblox.com`, secondary)
- game icons by ID (`thumbnails.roblox.com`, best effort)

Upstream failures never leave this module: they are logged and become `None`.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from adapters.http_client import build_async_client, fetch_json
from core.config import AppSettings
from core.domain.errors import UpstreamError
from core.domain.models import (
    DEFAULT_GAME_DESCRIPTION,
    GameStatus,
    Resolution,
    Resolved,
)
from core.interfaces.fetchers import GameStatusFetcher, UniverseLookup

logger = logging.getLogger(__name__)

THUMBNAIL_URL_TEMPLATE = (
    "https://tr.rbxcdn.com/place-thumbnail/image?id={game_id}&width=768&height=432&format=png"
)


def _count(value: Any) -> int:
    # bool is an int subclass; upstream never means a flag here
    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)) and value > 0:
        return int(value)
    return 0


def _text_or_default(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value
    return default


def _name(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def thumbnail_url_for(game_id: str) -> str:
    return THUMBNAIL_URL_TEMPLATE.format(game_id=quote(game_id, safe=""))


class RobloxUniverseLookup(UniverseLookup):
    """Maps a place ID to the universe that owns it."""

    _base_url = "https://apis.roblox.com"

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    async def universe_id_for(self, identifier: str) -> str | None:
        url = f"{self._base_url}/universes/v1/places/{quote(identifier, safe='')}/universe"
        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                payload = await fetch_json(client, url)
        except UpstreamError as exc:
            logger.warning("Place->universe lookup failed for %s: %s", identifier, exc)
            return None

        universe_id = payload.get("universeId") if isinstance(payload, dict) else None
        if isinstance(universe_id, bool) or not isinstance(universe_id, (int, str)) or not str(universe_id):
            logger.info("No universe ID for place ID %s", identifier)
            return None
        return str(universe_id)


class RobloxGameFetcher(GameStatusFetcher):
    """Game status with a two-upstream fallback chain.

    Primary: games API keyed by the universe ID (or by the raw identifier when
    resolution could not produce one). Secondary: place details keyed by the
    identifier itself, which uses the place-ID convention.
    """

    _games_base_url = "https://games.roblox.com"
    _places_base_url = "https://www.roblox.com"
    _thumbnails_base_url = "https://thumbnails.roblox.com"

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    async def fetch(self, resolution: Resolution) -> GameStatus | None:
        identifier = resolution.identifier
        canonical_id = resolution.universe_id if isinstance(resolution, Resolved) else identifier

        async with build_async_client(self._settings, transport=self._transport) as client:
            status = await self._from_games_api(client, canonical_id=canonical_id, game_id=identifier)
            if status is None:
                logger.info("Games API had nothing for %s, trying place details", canonical_id)
                status = await self._from_place_details(client, game_id=identifier)

        if status is None:
            logger.warning("No game data found for %s", identifier)
        return status

    async def _from_games_api(
        self,
        client: httpx.AsyncClient,
        *,
        canonical_id: str,
        game_id: str,
    ) -> GameStatus | None:
        try:
            payload = await fetch_json(
                client,
                f"{self._games_base_url}/v1/games",
                universeIds=canonical_id,
            )
        except UpstreamError as exc:
            logger.warning("Games API request failed for %s: %s", canonical_id, exc)
            return None

        if not isinstance(payload, dict):
            return None
        if payload.get("errors"):
            logger.warning("Games API returned errors for %s: %s", canonical_id, payload.get("errors"))
            return None

        entries = payload.get("data")
        if not isinstance(entries, list) or not entries or not isinstance(entries[0], dict):
            return None

        info = entries[0]
        name = _name(info.get("name"))
        if name is None:
            return None

        icon_url = await self._icon(client, canonical_id)
        return GameStatus(
            name=name,
            description=_text_or_default(info.get("description"), DEFAULT_GAME_DESCRIPTION),
            players_online=_count(info.get("playing")),
            total_visits=_count(info.get("visits")),
            thumbnail_url=thumbnail_url_for(game_id),
            icon_url=icon_url,
            canonical_id=canonical_id,
            game_id=game_id,
            source="games_api",
        )

    async def _from_place_details(self, client: httpx.AsyncClient, *, game_id: str) -> GameStatus | None:
        try:
            payload = await fetch_json(
                client,
                f"{self._places_base_url}/places/api-get-details",
                assetId=game_id,
            )
        except UpstreamError as exc:
            logger.warning("Place details request failed for %s: %s", game_id, exc)
            return None

        if not isinstance(payload, dict):
            return None
        name = _name(payload.get("Name"))
        if name is None:
            return None

        # The icon API rarely knows place IDs; still worth one try.
        icon_url = await self._icon(client, game_id)
        return GameStatus(
            name=name,
            description=_text_or_default(payload.get("Description"), DEFAULT_GAME_DESCRIPTION),
            players_online=_count(payload.get("OnlineCount")),
            total_visits=_count(payload.get("VisitedCount")),
            thumbnail_url=thumbnail_url_for(game_id),
            icon_url=icon_url,
            canonical_id=game_id,
            game_id=game_id,
            source="place_details",
        )

    async def _icon(self, client: httpx.AsyncClient, universe_id: str) -> str | None:
        try:
            payload = await fetch_json(
                client,
                f"{self._thumbnails_base_url}/v1/games/icons",
                universeIds=universe_id,
                size="150x150",
                format="Png",
                isCircular="false",
            )
        except UpstreamError as exc:
            logger.debug("Icon lookup failed for %s: %s", universe_id, exc)
            return None

        entries = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(entries, list) or not entries or not isinstance(entries[0], dict):
            return None
        image_url = entries[0].get("imageUrl")
        if isinstance(image_url, str) and image_url.strip():
            return image_url
        return None
