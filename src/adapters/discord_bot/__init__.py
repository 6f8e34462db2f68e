"""Discord adapter: slash commands, refresh button, bot client."""

from adapters.discord_bot.bot import GameStatusBot, build_bot, run_bot
from adapters.discord_bot.context import InteractionContext
from adapters.discord_bot.embeds import card_to_embed
from adapters.discord_bot.views import DiscordCardSurface, RefreshView

__all__ = [
	"DiscordCardSurface",
	"GameStatusBot",
	"InteractionContext",
	"RefreshView",
	"build_bot",
	"card_to_embed",
	"run_bot",
]
