from unittest.mock import AsyncMock

import pytest

from adapters.alias_store import JsonAliasStore
from adapters.game_sources import RobloxGameFetcher, RobloxUniverseLookup
from core.services.lookup_pipeline import (
    GameLookupPipeline,
    ServerLookupPipeline,
    parse_server_address,
)
from core.services.resolver import IdentifierResolver


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("play.example.com", ("play.example.com", 25565)),
        ("play.example.com:25570", ("play.example.com", 25570)),
        ("  play.example.com  ", ("play.example.com", 25565)),
        ("play.example.com:0", ("play.example.com:0", 25565)),
        ("play.example.com:70000", ("play.example.com:70000", 25565)),
        ("play.example.com:abc", ("play.example.com:abc", 25565)),
        ("::1", ("::1", 25565)),
    ],
)
def test_parse_server_address(raw, expected):
    assert parse_server_address(raw) == expected


def test_parse_server_address_default_port_is_configurable():
    assert parse_server_address("mc.example.org", 19132) == ("mc.example.org", 19132)


@pytest.mark.asyncio
async def test_server_pipeline_passes_host_and_port():
    fetcher = AsyncMock()
    fetcher.fetch.return_value = None
    pipeline = ServerLookupPipeline(fetcher=fetcher)

    await pipeline.run("mc.example.org:25570")

    fetcher.fetch.assert_awaited_once_with("mc.example.org", 25570)


@pytest.mark.asyncio
async def test_server_pipeline_empty_address_skips_upstream():
    fetcher = AsyncMock()
    pipeline = ServerLookupPipeline(fetcher=fetcher)

    assert await pipeline.run("   ") is None
    fetcher.fetch.assert_not_awaited()


def _game_pipeline(settings, upstream, aliases):
    resolver = IdentifierResolver(
        aliases=aliases,
        universes=RobloxUniverseLookup(settings, transport=upstream.transport),
    )
    return GameLookupPipeline(
        resolver=resolver,
        fetcher=RobloxGameFetcher(settings, transport=upstream.transport),
    )


@pytest.mark.asyncio
async def test_alias_to_games_api(settings, upstream, alias_path):
    aliases = JsonAliasStore(alias_path)
    aliases.save("adopt", "920587237")
    upstream.routes["apis.roblox.com/universes/v1/places/920587237/universe"] = {"universeId": 383310974}
    upstream.routes["games.roblox.com/v1/games"] = {"data": [{"name": "Adopt Me!", "playing": 5}]}

    status = await _game_pipeline(settings, upstream, aliases).run("adopt")

    assert status.name == "Adopt Me!"
    assert status.canonical_id == "383310974"
    assert status.game_id == "920587237"
    assert upstream.hits("games.roblox.com")[0].url.params["universeIds"] == "383310974"


@pytest.mark.asyncio
async def test_unconvertible_id_falls_back_to_place_details(settings, upstream, alias_path):
    upstream.routes["games.roblox.com/v1/games"] = {"errors": [{"code": 8}]}
    upstream.routes["www.roblox.com/places/api-get-details"] = {"Name": "Legacy Place", "VisitedCount": 10}

    status = await _game_pipeline(settings, upstream, JsonAliasStore(alias_path)).run("13058")

    assert status.name == "Legacy Place"
    assert status.source == "place_details"
    assert status.total_visits == 10
    # universe conversion 404s, so the raw token is tried against the games API
    assert upstream.hits("games.roblox.com")[0].url.params["universeIds"] == "13058"


@pytest.mark.asyncio
async def test_nothing_anywhere_is_not_found(settings, upstream, alias_path):
    status = await _game_pipeline(settings, upstream, JsonAliasStore(alias_path)).run("unknown-name")

    assert status is None
