"""Refresh button and the delivered-card surface.

The view has no discord.py timeout: the `ActivationStream` owns the fixed
refresh window, and the session disables the button when it closes.
"""

from __future__ import annotations

import logging

import discord

from adapters.discord_bot.embeds import card_to_embed
from core.domain.events import Activation
from core.domain.models import Card
from core.interfaces.chat import CardSurface
from core.services.refresh_session import ActivationStream

logger = logging.getLogger(__name__)

REFRESH_LABEL = "🔄 Refresh"


class RefreshView(discord.ui.View):
    def __init__(self, stream: ActivationStream) -> None:
        super().__init__(timeout=None)
        self._stream = stream

    async def interaction_check(self, interaction: discord.Interaction) -> bool:
        # Presses from anyone but the requester are dropped silently.
        return self._stream.accepts(interaction.user.id)

    @discord.ui.button(label=REFRESH_LABEL, style=discord.ButtonStyle.primary)
    async def refresh(self, interaction: discord.Interaction, button: discord.ui.Button) -> None:
        await interaction.response.defer()
        self._stream.push(Activation(user_id=interaction.user.id, handle=interaction))

    def disable(self) -> None:
        for item in self.children:
            if isinstance(item, discord.ui.Button):
                item.disabled = True
        self.stop()


class DiscordCardSurface(CardSurface):
    def __init__(self, *, message: discord.Message, view: RefreshView) -> None:
        self._message = message
        self._view = view

    @property
    def message(self) -> discord.Message:
        return self._message

    async def replace(self, activation: Activation, card: Card) -> None:
        interaction: discord.Interaction = activation.handle
        await interaction.edit_original_response(embed=card_to_embed(card), view=self._view)

    async def notify(self, activation: Activation, text: str) -> None:
        interaction: discord.Interaction = activation.handle
        await interaction.followup.send(text, ephemeral=True)

    async def disable_control(self) -> None:
        self._view.disable()
        await self._message.edit(view=self._view)
        logger.debug("Refresh button disabled on message %s", self._message.id)
