import logging
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from typer.testing import CliRunner

from cli import main as cli_main
from core.domain.models import ServerStatus
from core.services.status_commands import SERVER_OFFLINE

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path, alias_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GAMESTATUS_ALIAS_STORE_PATH", str(alias_path))
    monkeypatch.setenv("GAMESTATUS_DISCORD_TOKEN", "")
    root = logging.getLogger()
    before = list(root.handlers)
    yield
    for handler in list(root.handlers):
        if handler not in before:
            root.removeHandler(handler)
            handler.close()


def test_alias_save_then_list():
    saved = runner.invoke(cli_main.app, ["alias", "save", "920587237", "adopt"])
    assert saved.exit_code == 0
    assert "Game ID 920587237 has been saved under the name adopt." in saved.output

    listed = runner.invoke(cli_main.app, ["alias", "list"])
    assert listed.exit_code == 0
    assert "adopt" in listed.output
    assert "920587237" in listed.output


def test_alias_list_empty():
    result = runner.invoke(cli_main.app, ["alias", "list"])

    assert result.exit_code == 0
    assert "No saved games" in result.output


def test_server_offline_exits_nonzero(monkeypatch):
    lookup = SimpleNamespace(run=AsyncMock(return_value=None))
    monkeypatch.setattr(cli_main, "build_server_lookup", lambda settings: lookup)

    result = runner.invoke(cli_main.app, ["server", "down.example.com"])

    assert result.exit_code == 1
    assert SERVER_OFFLINE in result.output
    lookup.run.assert_awaited_once_with("down.example.com")


def test_server_card_is_printed(monkeypatch):
    status = ServerStatus(
        host="play.example.com",
        version="1.20.4",
        favicon_url="https://api.mcsrvstat.us/icon/play.example.com",
    )
    monkeypatch.setattr(
        cli_main,
        "build_server_lookup",
        lambda settings: SimpleNamespace(run=AsyncMock(return_value=status)),
    )

    result = runner.invoke(cli_main.app, ["server", "play.example.com"])

    assert result.exit_code == 0
    assert "Minecraft Server: play.example.com" in result.output
    assert "1.20.4" in result.output


def test_run_without_token_fails():
    result = runner.invoke(cli_main.app, ["run"])

    assert result.exit_code == 1
    assert "No bot token configured" in result.output
