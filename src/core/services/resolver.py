"""Token -> canonical identifier resolution (game lookups only).

Two stages, each with its own failure policy:

1. alias store: pass-through on miss;
2. place -> universe conversion: on failure the identifier is kept as-is
   and the outcome is `Unresolved`, so the fetcher takes its fallback branch.

Nothing raises past `IdentifierResolver.resolve`.
"""

from __future__ import annotations

import logging

from core.domain.models import Resolution, Resolved, Unresolved
from core.interfaces.alias_store import AliasStore
from core.interfaces.fetchers import UniverseLookup

logger = logging.getLogger(__name__)


class IdentifierResolver:
    def __init__(self, *, aliases: AliasStore, universes: UniverseLookup) -> None:
        self._aliases = aliases
        self._universes = universes

    async def resolve(self, token: str) -> Resolution:
        identifier = self._aliases.resolve(token)
        if identifier != token:
            logger.debug("Alias %r resolved to %s", token, identifier)

        try:
            universe_id = await self._universes.universe_id_for(identifier)
        except Exception:
            logger.exception("Universe lookup crashed for %s, keeping the original ID", identifier)
            universe_id = None

        if not universe_id:
            logger.info("No universe ID for %s, will try it as a universe ID", identifier)
            return Unresolved(identifier=identifier)

        logger.info("Using universe ID %s for provided ID %s", universe_id, identifier)
        return Resolved(identifier=identifier, universe_id=universe_id)
