"""Voxel-game server status sources.

Each module implements `core.interfaces.fetchers.ServerStatusFetcher`.
"""

from adapters.server_sources.mcsrvstat import McSrvStatFetcher

__all__ = [
	"McSrvStatFetcher",
]
