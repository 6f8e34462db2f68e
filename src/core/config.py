"""Core configuration.

- Centralizes environment variables (pydantic-settings) outside the CLI.
- Adapters (HTTP, alias file, Discord) read their knobs from the same object.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "gamestatus"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "gamestatus"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "gamestatus"
    return Path.home() / ".config" / "gamestatus"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _default_alias_store_path() -> Path:
    return get_user_config_dir() / "saved_games.json"


def _parse_env_lines(text: str) -> dict[str, str]:
    """Read ``KEY=value`` pairs; comments and malformed lines are skipped."""

    data: dict[str, str] = {}
    for line in (raw.strip() for raw in text.splitlines()):
        if line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if sep and key.strip():
            data[key.strip()] = value.strip().strip("\"'")
    return data


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Merge `values` into the per-user .env (keys sorted, one header line).

    Used by ``gamestatus doctor setup-token`` so the token never has to be
    typed into a file by hand.
    """

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    try:
        merged = _parse_env_lines(env_path.read_text(encoding="utf-8"))
    except OSError:
        merged = {}
    merged.update((key, value) for key, value in values.items() if value is not None)

    body = "".join(f"{key}={merged[key]}\n" for key in sorted(merged))
    env_path.write_text("# gamestatus user config (.env)\n" + body, encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central application settings.

    One typed, validated contract shared by the CLI, the bot and the adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="GAMESTATUS_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    discord_token: str | None = Field(
        default=None,
        description="Bot token for the chat platform. Only needed by `run`.",
    )
    sync_commands: bool = Field(
        default=True,
        description="Sync the slash command tree when the bot starts.",
    )

    http_timeout_seconds: float = Field(
        default=15.0,
        gt=0,
        description="Per-request timeout against the upstream APIs (seconds).",
    )
    user_agent: str = Field(
        default="gamestatus/0.1 (+https://local)",
        min_length=1,
        description="User-Agent sent to the upstream APIs.",
    )

    alias_store_path: Path = Field(
        default_factory=_default_alias_store_path,
        description="JSON file holding the saved game aliases.",
    )

    refresh_ttl_seconds: float = Field(
        default=300.0,
        gt=0,
        description="Lifetime of the refresh button on a delivered card (seconds).",
    )
    default_server_port: int = Field(
        default=25565,
        ge=1,
        le=65535,
        description="Port used for server lookups when the address carries none.",
    )
    presence_rotation_seconds: float = Field(
        default=3600.0,
        gt=0,
        description="How often the bot rotates its presence text (seconds).",
    )

    log_level: str = Field(
        default="INFO",
        description="Console log level.",
    )
    debug_log_enabled: bool = Field(
        default=False,
        description="Also write DEBUG logs to a rotating file.",
    )
    debug_log_path: Path = Field(
        default=Path("debug.log"),
        description="Rotating debug log file (only when debug_log_enabled).",
    )
