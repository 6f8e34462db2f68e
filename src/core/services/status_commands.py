"""Command handlers, independent of the chat platform.

The Discord adapter builds a `CommandContext` per invocation and calls
`StatusCommands.execute(ctx, handler, *args)`; handlers talk to the user
only through that context.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Any, Awaitable, Callable

from core.domain.models import Card
from core.interfaces.alias_store import AliasStore
from core.interfaces.chat import CommandContext
from core.services.card_renderer import render_game_card, render_server_card
from core.services.lookup_pipeline import GameLookupPipeline, ServerLookupPipeline
from core.services.refresh_session import (
    ActivationStream,
    RefreshSession,
    RefreshSessionRegistry,
)

logger = logging.getLogger(__name__)

SERVER_OFFLINE = "⚠️ The server is offline or unreachable."
SERVER_REFRESH_FAILED = "⚠️ Error updating server status."
GAME_NOT_FOUND = (
    "⚠️ No valid game ID or game data found. "
    "Please make sure you're using a valid Roblox place ID or universe ID."
)
GAME_REFRESH_FAILED = "⚠️ Error updating game status."
GAME_INPUT_MISSING = (
    "⚠️ Please provide a Roblox game ID or saved game name. "
    "Example: `/rbxsearch game gameid:123456`"
)
ALIAS_ARGS_MISSING = "⚠️ Both game ID and game name are required."
COMMAND_FAILED_PREFIX = "⚠️ An error occurred while executing the command: "

Handler = Callable[..., Awaitable[Any]]


class StatusCommands:
    def __init__(
        self,
        *,
        aliases: AliasStore,
        game_lookup: GameLookupPipeline,
        server_lookup: ServerLookupPipeline,
        sessions: RefreshSessionRegistry,
        refresh_ttl: float = 300.0,
    ) -> None:
        self._aliases = aliases
        self._game_lookup = game_lookup
        self._server_lookup = server_lookup
        self._sessions = sessions
        self._refresh_ttl = refresh_ttl

    @property
    def sessions(self) -> RefreshSessionRegistry:
        return self._sessions

    async def execute(self, ctx: CommandContext, handler: Handler, *args: Any) -> None:
        """Run `handler`; any failure becomes an ephemeral error reply."""

        try:
            await handler(ctx, *args)
        except Exception as exc:
            logger.exception("Error executing command %s", getattr(handler, "__name__", handler))
            try:
                await ctx.send(f"{COMMAND_FAILED_PREFIX}{exc}", ephemeral=True)
            except Exception as report_exc:
                logger.error("Could not report command failure: %s", report_exc)

    async def lookup_server(self, ctx: CommandContext, ip: str) -> RefreshSession | None:
        await ctx.defer()
        card = await self._server_card(ip)
        if card is None:
            await ctx.send(SERVER_OFFLINE)
            return None
        return await self._deliver(
            ctx,
            card,
            refresh=partial(self._server_card, ip),
            failure_notice=SERVER_REFRESH_FAILED,
        )

    async def lookup_game(self, ctx: CommandContext, token: str | None) -> RefreshSession | None:
        token = (token or "").strip()
        if not token:
            logger.warning("No game input provided")
            await ctx.send(GAME_INPUT_MISSING)
            return None

        logger.info("Received game input: %s", token)
        # Several sequential upstream calls; acknowledge first.
        await ctx.defer()
        card = await self._game_card(token)
        if card is None:
            await ctx.send(GAME_NOT_FOUND)
            return None
        return await self._deliver(
            ctx,
            card,
            refresh=partial(self._game_card, token),
            failure_notice=GAME_REFRESH_FAILED,
        )

    async def save_alias(self, ctx: CommandContext, identifier: str | None, name: str | None) -> None:
        if not identifier or not name:
            await ctx.send(ALIAS_ARGS_MISSING)
            return
        self._aliases.save(name, identifier)
        await ctx.send(f"Game ID {identifier} has been saved under the name {name}.")

    async def _server_card(self, ip: str) -> Card | None:
        status = await self._server_lookup.run(ip)
        return render_server_card(status) if status is not None else None

    async def _game_card(self, token: str) -> Card | None:
        status = await self._game_lookup.run(token)
        return render_game_card(status) if status is not None else None

    async def _deliver(
        self,
        ctx: CommandContext,
        card: Card,
        *,
        refresh: Callable[[], Awaitable[Card | None]],
        failure_notice: str,
    ) -> RefreshSession:
        stream = ActivationStream(owner_id=ctx.user_id, ttl=self._refresh_ttl)
        surface = await ctx.send_card(card, stream)
        stream.start()
        session = RefreshSession(
            owner_id=ctx.user_id,
            surface=surface,
            stream=stream,
            refresh=refresh,
            failure_notice=failure_notice,
        )
        self._sessions.start(session)
        return session
