"""`CommandContext` over a slash-command `discord.Interaction`."""

from __future__ import annotations

import discord

from adapters.discord_bot.embeds import card_to_embed
from adapters.discord_bot.views import DiscordCardSurface, RefreshView
from core.domain.models import Card
from core.interfaces.chat import CommandContext
from core.services.refresh_session import ActivationStream


class InteractionContext(CommandContext):
    def __init__(self, interaction: discord.Interaction) -> None:
        self._interaction = interaction

    @property
    def user_id(self) -> int:
        return self._interaction.user.id

    @property
    def deferred(self) -> bool:
        return self._interaction.response.is_done()

    async def defer(self) -> None:
        if not self._interaction.response.is_done():
            await self._interaction.response.defer(thinking=True)

    async def send(self, content: str, *, ephemeral: bool = False) -> None:
        # Once answered (or deferred), the only thing left is editing that answer.
        if self._interaction.response.is_done():
            await self._interaction.edit_original_response(content=content, embed=None, view=None)
            return
        await self._interaction.response.send_message(content, ephemeral=ephemeral)

    async def send_card(self, card: Card, stream: ActivationStream) -> DiscordCardSurface:
        view = RefreshView(stream)
        embed = card_to_embed(card)
        if self._interaction.response.is_done():
            message = await self._interaction.edit_original_response(content=None, embed=embed, view=view)
        else:
            await self._interaction.response.send_message(embed=embed, view=view)
            message = await self._interaction.original_response()
        return DiscordCardSurface(message=message, view=view)
