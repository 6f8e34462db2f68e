"""Discord client: command tree, presence rotation, shutdown."""

from __future__ import annotations

import logging
import random

import discord
from discord import app_commands
from discord.ext import tasks

from adapters.discord_bot.commands import register_commands
from core.config import AppSettings
from core.services.factory import build_status_commands
from core.services.status_commands import StatusCommands

logger = logging.getLogger(__name__)

COMMAND_FAILED = "There was an error while executing this command!"

PRESENCE_ACTIVITIES: tuple[tuple[discord.ActivityType, str], ...] = (
    (discord.ActivityType.playing, "Minecraft & Roblox Servers"),
    (discord.ActivityType.watching, "for server stats"),
    (discord.ActivityType.listening, "/help for commands"),
)


class GameStatusBot(discord.Client):
    def __init__(self, *, settings: AppSettings, handlers: StatusCommands) -> None:
        kind, name = PRESENCE_ACTIVITIES[0]
        super().__init__(
            intents=discord.Intents.default(),
            activity=discord.Activity(type=kind, name=name),
            status=discord.Status.online,
        )
        self.settings = settings
        self.handlers = handlers
        self.tree = app_commands.CommandTree(self)
        self.tree.error(self.on_app_command_error)
        register_commands(self.tree, handlers)
        self.presence_loop = tasks.loop(seconds=settings.presence_rotation_seconds)(self.rotate_presence)
        self.presence_loop.before_loop(self.wait_until_ready)

    async def setup_hook(self) -> None:
        if self.settings.sync_commands:
            try:
                synced = await self.tree.sync()
                logger.info("Synced %d global commands: %s", len(synced), [c.name for c in synced])
            except discord.HTTPException as exc:
                logger.error("Global command sync failed: %s", exc)
        self.presence_loop.start()

    async def on_ready(self) -> None:
        logger.info("✅ %s has logged in! Guilds=%d", self.user, len(self.guilds))

    async def rotate_presence(self) -> None:
        # First tick fires right away; keep the startup presence for one period.
        if self.presence_loop.current_loop == 0:
            return
        kind, name = random.choice(PRESENCE_ACTIVITIES)
        await self.change_presence(activity=discord.Activity(type=kind, name=name))

    async def on_app_command_error(
        self,
        interaction: discord.Interaction,
        error: app_commands.AppCommandError,
    ) -> None:
        logger.error(
            "Slash command error: user=%s guild=%s channel=%s error=%r",
            getattr(interaction.user, "id", None),
            getattr(interaction.guild, "id", None),
            getattr(interaction.channel, "id", None),
            error,
        )
        try:
            if interaction.response.is_done():
                await interaction.followup.send(COMMAND_FAILED, ephemeral=True)
            else:
                await interaction.response.send_message(COMMAND_FAILED, ephemeral=True)
        except discord.HTTPException as exc:
            logger.warning("Could not report slash command error: %s", exc)

    async def close(self) -> None:
        if self.presence_loop.is_running():
            self.presence_loop.cancel()
        await self.handlers.sessions.close()
        await super().close()


def build_bot(settings: AppSettings) -> GameStatusBot:
    return GameStatusBot(settings=settings, handlers=build_status_commands(settings))


def run_bot(settings: AppSettings) -> None:
    """Blocking: log in and serve until interrupted."""

    if not settings.discord_token:
        raise ValueError("discord_token is not configured (GAMESTATUS_DISCORD_TOKEN)")
    bot = build_bot(settings)
    logger.info("🔄 Logging in...")
    bot.run(settings.discord_token, log_handler=None)
