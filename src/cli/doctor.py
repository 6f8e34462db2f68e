"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, write_user_env_vars
from core.services.factory import build_alias_store

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

UPSTREAM_PROBES: tuple[tuple[str, str], ...] = (
    ("mcsrvstat.us", "https://api.mcsrvstat.us/"),
    ("Roblox universes API", "https://apis.roblox.com/universes/v1/places/1818/universe"),
    ("Roblox games API", "https://games.roblox.com/v1/games?universeIds=13058"),
    ("Roblox thumbnails API", "https://thumbnails.roblox.com/v1/games/icons?universeIds=13058&size=150x150&format=Png&isCircular=false"),
)


async def _check_http(settings: AppSettings, url: str) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


async def _check_upstreams(settings: AppSettings) -> list[tuple[str, bool, str]]:
    results = await asyncio.gather(*(_check_http(settings, url) for _, url in UPSTREAM_PROBES))
    return [(label, ok, detail) for (label, _), (ok, detail) in zip(UPSTREAM_PROBES, results)]


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="Gamestatus Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    if settings.discord_token:
        table.add_row("Bot token", "OK", "Configured")
    else:
        table.add_row("Bot token", "MISSING", "Run `gamestatus doctor setup-token`")
    table.add_row("Refresh window", "OK", f"{settings.refresh_ttl_seconds:g}s")

    store = build_alias_store(settings)
    aliases = store.load()
    detail = f"{store.path} ({len(aliases)} saved)" if store.path.exists() else f"{store.path} (not created yet)"
    table.add_row("Alias file", "OK", detail)

    # Connectivity (best-effort)
    for label, ok, detail in asyncio.run(_check_upstreams(settings)):
        table.add_row(label, "OK" if ok else "FAIL", detail)

    _console.print(table)


@app.command(name="setup-token")
def setup_token() -> None:
    """Store the bot token in the user config .env (no manual editing)."""

    token = typer.prompt("Discord bot token", hide_input=True, confirmation_prompt=False).strip()
    if not token:
        raise typer.BadParameter("token is required")

    env_path = write_user_env_vars({"GAMESTATUS_DISCORD_TOKEN": token})
    _console.print(f"[green]Saved bot token to:[/green] {env_path}")
