"""Game metadata sources (platform-hosted games).

Each module implements `core.interfaces.fetchers.GameStatusFetcher` and, when
the platform has two ID spaces, `UniverseLookup`.
"""

from adapters.game_sources.roblox import RobloxGameFetcher, RobloxUniverseLookup

__all__ = [
	"RobloxGameFetcher",
	"RobloxUniverseLookup",
]
