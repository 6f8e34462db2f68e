"""Domain models (Pydantic v2).

- Upstream responses from several APIs are normalized into these shapes
  before anything is rendered.
- The models describe *what* the data is, not *how* it is fetched.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

DEFAULT_GAME_DESCRIPTION = "No description available."
DEFAULT_SERVER_MOTD = "No description available"
DEFAULT_SERVER_VERSION = "Unknown"
DEFAULT_SERVER_PORT = 25565


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class GameStatus(BaseModel):
    """Live status of a platform-hosted game, whatever upstream answered."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        min_length=1,
        description="Display name of the game.",
    )
    description: str = Field(
        default=DEFAULT_GAME_DESCRIPTION,
        description="Public game description.",
    )
    players_online: int = Field(
        default=0,
        ge=0,
        description="Players currently in game.",
    )
    total_visits: int = Field(
        default=0,
        ge=0,
        description="Lifetime visit counter.",
    )
    thumbnail_url: str = Field(
        ...,
        description="Large place thumbnail.",
    )
    icon_url: str | None = Field(
        default=None,
        description="Square game icon, when the icon API returned one.",
    )
    canonical_id: str = Field(
        ...,
        min_length=1,
        description="ID used against the upstream that produced this status.",
    )
    game_id: str = Field(
        ...,
        min_length=1,
        description="Identifier looked up (alias already resolved).",
    )
    source: Literal["games_api", "place_details"] = Field(
        default="games_api",
        description="Which upstream produced the data.",
    )
    fetched_at: datetime = Field(
        default_factory=_utcnow,
        description="When the upstream answered (UTC).",
    )


class ServerStatus(BaseModel):
    """Live status of an online voxel-game server."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(..., min_length=1)
    port: int = Field(default=DEFAULT_SERVER_PORT, ge=1, le=65535)
    version: str = Field(default=DEFAULT_SERVER_VERSION)
    players_online: int = Field(default=0, ge=0)
    max_players: int = Field(default=0, ge=0)
    motd: str = Field(default=DEFAULT_SERVER_MOTD)
    favicon_url: str = Field(..., description="Icon URL (never inline image data).")
    fetched_at: datetime = Field(default_factory=_utcnow)


class Resolved(BaseModel):
    """The identifier was mapped to a universe-style ID."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["resolved"] = "resolved"
    identifier: str = Field(..., description="Alias-resolved token, before ID conversion.")
    universe_id: str = Field(..., min_length=1)


class Unresolved(BaseModel):
    """No universe-style ID could be derived; fetchers must fall back."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unresolved"] = "unresolved"
    identifier: str = Field(..., description="Alias-resolved token, before ID conversion.")


Resolution = Union[Resolved, Unresolved]


class CardField(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    value: str
    inline: bool = True


class Card(BaseModel):
    """Platform-neutral display card.

    The chat adapter turns it into its native rich message; the CLI prints it
    as a panel.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1, max_length=256)
    description: str | None = Field(default=None, max_length=4096)
    color: int = Field(default=0x000000, ge=0, le=0xFFFFFF)
    fields: tuple[CardField, ...] = ()
    image_url: str | None = None
    thumbnail_url: str | None = None
    footer: str | None = None
    timestamp: datetime | None = None
