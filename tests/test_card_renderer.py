from datetime import datetime, timezone

from core.domain.models import GameStatus, ServerStatus
from core.services.card_renderer import (
    GAME_COLOR,
    GAME_FOOTER,
    SERVER_COLOR,
    SERVER_FOOTER,
    render_game_card,
    render_server_card,
)

FETCHED = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)


def _game(**overrides):
    values = dict(
        name="Adopt Me!",
        description="Raise and dress cute pets.",
        players_online=120345,
        total_visits=35000000000,
        thumbnail_url="https://tr.rbxcdn.com/thumb.png",
        icon_url="https://tr.rbxcdn.com/icon.png",
        canonical_id="383310974",
        game_id="920587237",
        fetched_at=FETCHED,
    )
    values.update(overrides)
    return GameStatus(**values)


def _server(**overrides):
    values = dict(
        host="play.example.com",
        version="1.20.4",
        players_online=12,
        max_players=100,
        motd="Welcome",
        favicon_url="https://api.mcsrvstat.us/icon/play.example.com",
        fetched_at=FETCHED,
    )
    values.update(overrides)
    return ServerStatus(**values)


def test_game_card_layout():
    card = render_game_card(_game())

    assert card.title == "Roblox Game: Adopt Me!"
    assert card.description == "Raise and dress cute pets."
    assert card.color == GAME_COLOR
    assert [(f.name, f.value) for f in card.fields] == [
        ("🕹️ Players Online", "120345"),
        ("👀 Total Visits", "35000000000"),
        ("🆔 Game ID", "920587237"),
    ]
    assert all(f.inline for f in card.fields)
    assert card.image_url == "https://tr.rbxcdn.com/thumb.png"
    assert card.thumbnail_url == "https://tr.rbxcdn.com/icon.png"
    assert card.footer == GAME_FOOTER
    assert card.timestamp == FETCHED


def test_game_card_without_icon_has_no_thumbnail():
    card = render_game_card(_game(icon_url=None))

    assert card.thumbnail_url is None


def test_server_card_layout():
    card = render_server_card(_server())

    assert card.title == "Minecraft Server: play.example.com"
    assert card.description == "Welcome"
    assert card.color == SERVER_COLOR
    assert [(f.name, f.value) for f in card.fields] == [
        ("🟢 Players Online", "12/100"),
        ("🌍 Version", "1.20.4"),
    ]
    assert card.thumbnail_url == "https://api.mcsrvstat.us/icon/play.example.com"
    assert card.image_url is None
    assert card.footer == SERVER_FOOTER


def test_rendering_is_deterministic():
    status = _game()

    assert render_game_card(status) == render_game_card(status)


def test_long_text_is_clamped_to_embed_limits():
    card = render_game_card(_game(name="x" * 400, description="y" * 5000))

    assert len(card.title) == 256
    assert card.title.endswith("…")
    assert len(card.description) == 4096
    assert card.description.endswith("…")
