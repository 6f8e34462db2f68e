"""Events produced by a refresh control subscription."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Activation:
    """A user pressed the refresh control.

    `handle` is whatever the chat adapter needs to answer that press (for
    Discord, the component `Interaction`). The core never inspects it.
    """

    user_id: int
    handle: Any = None


@dataclass(frozen=True)
class Expired:
    """The refresh window closed. Always the last event of a stream."""


SessionEvent = Union[Activation, Expired]
