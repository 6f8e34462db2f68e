"""Slash command registration.

- ``/mcsearch ip``
- ``/rbxsearch game gameid``
- ``/rbxsearch save gameid gamename``
"""

from __future__ import annotations

import discord
from discord import app_commands

from adapters.discord_bot.context import InteractionContext
from core.services.status_commands import StatusCommands


def build_rbxsearch_group(handlers: StatusCommands) -> app_commands.Group:
    group = app_commands.Group(name="rbxsearch", description="Search for a Roblox game")

    @group.command(name="game", description="Look up a Roblox game by ID or saved name")
    @app_commands.describe(gameid="The Roblox game ID or saved name to search")
    async def game(interaction: discord.Interaction, gameid: str) -> None:
        await handlers.execute(InteractionContext(interaction), handlers.lookup_game, gameid)

    @group.command(name="save", description="Save a game ID to a name")
    @app_commands.describe(gameid="The Roblox game ID", gamename="The name to save the game under")
    async def save(interaction: discord.Interaction, gameid: str, gamename: str) -> None:
        await handlers.execute(InteractionContext(interaction), handlers.save_alias, gameid, gamename)

    return group


def register_commands(tree: app_commands.CommandTree, handlers: StatusCommands) -> None:
    @tree.command(name="mcsearch", description="Check Minecraft server status")
    @app_commands.describe(ip="The Minecraft server IP or domain")
    async def mcsearch(interaction: discord.Interaction, ip: str) -> None:
        await handlers.execute(InteractionContext(interaction), handlers.lookup_server, ip)

    tree.add_command(build_rbxsearch_group(handlers))
