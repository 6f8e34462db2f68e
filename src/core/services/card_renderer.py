"""Status -> display card.

Pure and deterministic: the card timestamp is the status `fetched_at`, so
rendering the same status twice yields equal cards.
"""

from __future__ import annotations

from core.domain.models import Card, CardField, GameStatus, ServerStatus

GAME_COLOR = 0xFF0000
SERVER_COLOR = 0x00FF00

GAME_FOOTER = "Powered by Roblox API/Undefined Search"
SERVER_FOOTER = "Powered by MCSrvStat/Undefined Search"

TITLE_LIMIT = 256
DESCRIPTION_LIMIT = 4096
FIELD_VALUE_LIMIT = 1024


def _clamp(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[: limit - 1].rstrip() + "…"


def render_game_card(status: GameStatus) -> Card:
    return Card(
        title=_clamp(f"Roblox Game: {status.name}", TITLE_LIMIT),
        description=_clamp(status.description, DESCRIPTION_LIMIT),
        color=GAME_COLOR,
        fields=(
            CardField(name="🕹️ Players Online", value=str(status.players_online)),
            CardField(name="👀 Total Visits", value=str(status.total_visits)),
            CardField(name="🆔 Game ID", value=_clamp(status.game_id, FIELD_VALUE_LIMIT)),
        ),
        image_url=status.thumbnail_url,
        thumbnail_url=status.icon_url,
        footer=GAME_FOOTER,
        timestamp=status.fetched_at,
    )


def render_server_card(status: ServerStatus) -> Card:
    return Card(
        title=_clamp(f"Minecraft Server: {status.host}", TITLE_LIMIT),
        description=_clamp(status.motd, DESCRIPTION_LIMIT),
        color=SERVER_COLOR,
        fields=(
            CardField(name="🟢 Players Online", value=f"{status.players_online}/{status.max_players}"),
            CardField(name="🌍 Version", value=_clamp(status.version, FIELD_VALUE_LIMIT)),
        ),
        thumbnail_url=status.favicon_url,
        footer=SERVER_FOOTER,
        timestamp=status.fetched_at,
    )
