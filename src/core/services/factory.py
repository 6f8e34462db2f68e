"""Object graph for one process, built from `AppSettings`."""

from __future__ import annotations

from adapters.alias_store import JsonAliasStore
from adapters.game_sources import RobloxGameFetcher, RobloxUniverseLookup
from adapters.server_sources import McSrvStatFetcher
from core.config import AppSettings
from core.interfaces.alias_store import AliasStore
from core.services.lookup_pipeline import GameLookupPipeline, ServerLookupPipeline
from core.services.refresh_session import RefreshSessionRegistry
from core.services.resolver import IdentifierResolver
from core.services.status_commands import StatusCommands


def build_alias_store(settings: AppSettings) -> JsonAliasStore:
    return JsonAliasStore(settings.alias_store_path)


def build_game_lookup(settings: AppSettings, aliases: AliasStore) -> GameLookupPipeline:
    resolver = IdentifierResolver(aliases=aliases, universes=RobloxUniverseLookup(settings))
    return GameLookupPipeline(resolver=resolver, fetcher=RobloxGameFetcher(settings))


def build_server_lookup(settings: AppSettings) -> ServerLookupPipeline:
    return ServerLookupPipeline(
        fetcher=McSrvStatFetcher(settings),
        default_port=settings.default_server_port,
    )


def build_status_commands(
    settings: AppSettings,
    *,
    sessions: RefreshSessionRegistry | None = None,
) -> StatusCommands:
    aliases = build_alias_store(settings)
    return StatusCommands(
        aliases=aliases,
        game_lookup=build_game_lookup(settings, aliases),
        server_lookup=build_server_lookup(settings),
        sessions=sessions or RefreshSessionRegistry(),
        refresh_ttl=settings.refresh_ttl_seconds,
    )
