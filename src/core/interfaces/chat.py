"""Chat platform contracts.

The command handlers and the refresh session only see these two shapes; the
Discord adapter implements them over `discord.Interaction` and
`discord.Message`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from core.domain.events import Activation
from core.domain.models import Card

if TYPE_CHECKING:
    from core.services.refresh_session import ActivationStream


@runtime_checkable
class CardSurface(Protocol):
    """A delivered card together with its refresh control."""

    async def replace(self, activation: Activation, card: Card) -> None:
        """Swap the card in place, answering `activation`."""

        ...

    async def notify(self, activation: Activation, text: str) -> None:
        """Transient notice visible only to whoever sent `activation`."""

        ...

    async def disable_control(self) -> None:
        """Render the refresh control disabled. May raise if the card is gone."""

        ...


@runtime_checkable
class CommandContext(Protocol):
    """One command invocation as seen by the handlers."""

    @property
    def user_id(self) -> int: ...

    @property
    def deferred(self) -> bool:
        """True once `defer()` was called (replies become edits)."""

        ...

    async def defer(self) -> None: ...

    async def send(self, content: str, *, ephemeral: bool = False) -> None:
        """Reply, or edit the deferred reply."""

        ...

    async def send_card(self, card: Card, stream: ActivationStream) -> CardSurface:
        """Deliver `card` with a refresh control feeding `stream`."""

        ...
