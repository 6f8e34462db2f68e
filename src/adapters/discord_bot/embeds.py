"""`Card` -> `discord.Embed`."""

from __future__ import annotations

import discord

from core.domain.models import Card


def card_to_embed(card: Card) -> discord.Embed:
    embed = discord.Embed(
        title=card.title,
        description=card.description,
        color=card.color,
        timestamp=card.timestamp,
    )
    for field in card.fields:
        embed.add_field(name=field.name, value=field.value, inline=field.inline)
    if card.image_url:
        embed.set_image(url=card.image_url)
    if card.thumbnail_url:
        embed.set_thumbnail(url=card.thumbnail_url)
    if card.footer:
        embed.set_footer(text=card.footer)
    return embed
