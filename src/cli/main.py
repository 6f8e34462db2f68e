"""Command line entry point (`gamestatus`).

- ``run``: start the Discord bot.
- ``server`` / ``game``: one-shot lookups printed as cards.
- ``alias``: manage saved game names.
- ``doctor``: diagnostics.
"""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console

from cli.doctor import app as doctor_app
from cli.ui_components import build_alias_table, build_card_panel, print_banner
from core.config import AppSettings
from core.domain.errors import AliasStoreError
from core.logging_config import configure_logging
from core.services.card_renderer import render_game_card, render_server_card
from core.services.factory import build_alias_store, build_game_lookup, build_server_lookup
from core.services.status_commands import GAME_NOT_FOUND, SERVER_OFFLINE

app = typer.Typer(no_args_is_help=True, help="Live status cards for Minecraft servers and Roblox games.")
alias_app = typer.Typer(no_args_is_help=True, help="Manage saved game names.")
app.add_typer(alias_app, name="alias")
app.add_typer(doctor_app, name="doctor")

_console = Console()


@app.callback()
def _main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
) -> None:
    settings = AppSettings()
    if verbose:
        settings = settings.model_copy(update={"log_level": "DEBUG"})
    configure_logging(settings)


@app.command("run")
def run_bot_command() -> None:
    """Start the Discord bot (blocks until interrupted)."""

    from adapters.discord_bot import run_bot  # noqa: PLC0415

    settings = AppSettings()
    if not settings.discord_token:
        _console.print(
            "[red]No bot token configured.[/red] Set GAMESTATUS_DISCORD_TOKEN or run "
            "`gamestatus doctor setup-token`."
        )
        raise typer.Exit(code=1)
    print_banner(_console)
    run_bot(settings)


@app.command()
def server(ip: str = typer.Argument(..., help="Server host, optionally host:port.")) -> None:
    """Look up a Minecraft server once."""

    settings = AppSettings()
    status = asyncio.run(build_server_lookup(settings).run(ip))
    if status is None:
        _console.print(f"[yellow]{SERVER_OFFLINE}[/yellow]")
        raise typer.Exit(code=1)
    _console.print(build_card_panel(render_server_card(status)))


@app.command()
def game(token: str = typer.Argument(..., help="Place ID, universe ID or saved name.")) -> None:
    """Look up a Roblox game once."""

    settings = AppSettings()
    lookup = build_game_lookup(settings, build_alias_store(settings))
    status = asyncio.run(lookup.run(token.strip()))
    if status is None:
        _console.print(f"[yellow]{GAME_NOT_FOUND}[/yellow]")
        raise typer.Exit(code=1)
    _console.print(build_card_panel(render_game_card(status)))


@alias_app.command("save")
def alias_save(
    identifier: str = typer.Argument(..., help="Roblox game ID."),
    name: str = typer.Argument(..., help="Name to save it under."),
) -> None:
    """Save a game ID under a name."""

    store = build_alias_store(AppSettings())
    try:
        store.save(name, identifier)
    except AliasStoreError as exc:
        _console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc
    _console.print(f"Game ID {identifier} has been saved under the name {name}.")


@alias_app.command("list")
def alias_list() -> None:
    """Show saved game names."""

    store = build_alias_store(AppSettings())
    aliases = store.load()
    if not aliases:
        _console.print(f"[dim]No saved games in {store.path}[/dim]")
        return
    _console.print(build_alias_table(aliases))


def run() -> None:
    app()
