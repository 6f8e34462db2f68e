"""Refresh sessions: a delivered card kept live by one refresh control.

Lifecycle::

    ACTIVE --(ttl elapsed | process shutdown)--> EXPIRED

- `ActivationStream` is the subscription: a lazy, finite async iterator of
  `Activation` events from the requester only, terminated by exactly one
  `Expired` event once the window closes (or the stream is closed).
- `RefreshSession` consumes the stream. Each activation re-runs the whole
  lookup against the original input and replaces the card in place.
  Activations are not queued behind each other: overlapping refreshes run
  concurrently and the last one to finish owns the final card.
- `RefreshSessionRegistry` keeps the running sessions so a shutdown can
  expire them all.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Awaitable, Callable

from core.domain.events import Activation, Expired, SessionEvent
from core.domain.models import Card
from core.interfaces.chat import CardSurface

logger = logging.getLogger(__name__)

RefreshCallback = Callable[[], Awaitable["Card | None"]]

_WAKE = object()


class SessionState(str, Enum):
    ACTIVE = "active"
    EXPIRED = "expired"


class ActivationStream:
    """Owner-filtered, deadline-bounded stream of refresh activations.

    The chat adapter calls `push` from its control callback; the session
    iterates. The deadline is fixed when `start` is called (or on first
    iteration) and is not extended by activity.
    """

    def __init__(self, *, owner_id: int, ttl: float) -> None:
        self._owner_id = owner_id
        self._ttl = ttl
        self._queue: asyncio.Queue[object] = asyncio.Queue()
        self._deadline: float | None = None
        self._closed = False
        self._finished = False

    @property
    def owner_id(self) -> int:
        return self._owner_id

    @property
    def ttl(self) -> float:
        return self._ttl

    @property
    def closed(self) -> bool:
        return self._closed

    def start(self) -> None:
        if self._deadline is None:
            self._deadline = asyncio.get_running_loop().time() + self._ttl

    def accepts(self, user_id: int) -> bool:
        return not self._closed and user_id == self._owner_id

    def push(self, activation: Activation) -> bool:
        """Queue `activation`; returns False when it was filtered out."""

        if not self.accepts(activation.user_id):
            return False
        self._queue.put_nowait(activation)
        return True

    def close(self) -> None:
        """End the window now. The iterator yields `Expired` next."""

        if self._closed:
            return
        self._closed = True
        self._queue.put_nowait(_WAKE)

    def __aiter__(self) -> ActivationStream:
        return self

    async def __anext__(self) -> SessionEvent:
        if self._finished:
            raise StopAsyncIteration
        self.start()
        assert self._deadline is not None

        loop = asyncio.get_running_loop()
        while True:
            remaining = self._deadline - loop.time()
            if self._closed or remaining <= 0:
                self._closed = True
                self._finished = True
                return Expired()
            try:
                item = await asyncio.wait_for(self._queue.get(), timeout=remaining)
            except asyncio.TimeoutError:
                continue
            if item is _WAKE:
                continue
            if isinstance(item, Activation):
                return item


class RefreshSession:
    """One card, one refresh control, one requester."""

    def __init__(
        self,
        *,
        owner_id: int,
        surface: CardSurface,
        stream: ActivationStream,
        refresh: RefreshCallback,
        failure_notice: str,
    ) -> None:
        self._owner_id = owner_id
        self._surface = surface
        self._stream = stream
        self._refresh = refresh
        self._failure_notice = failure_notice
        self._inflight: set[asyncio.Task[None]] = set()
        self.state = SessionState.ACTIVE
        self.started_at = datetime.now(timezone.utc)

    @property
    def owner_id(self) -> int:
        return self._owner_id

    @property
    def ttl(self) -> float:
        return self._stream.ttl

    @property
    def surface(self) -> CardSurface:
        return self._surface

    async def run(self) -> None:
        """Consume the stream until the terminal `Expired` event."""

        try:
            async for event in self._stream:
                if isinstance(event, Expired):
                    await self.expire()
                    break
                if event.user_id != self._owner_id or self.state is not SessionState.ACTIVE:
                    continue
                task = asyncio.create_task(self._handle(event))
                self._inflight.add(task)
                task.add_done_callback(self._inflight.discard)
        finally:
            self._stream.close()

    async def expire(self) -> bool:
        """Disable the control once. Returns False if already expired."""

        if self.state is SessionState.EXPIRED:
            return False
        self.state = SessionState.EXPIRED
        self._stream.close()
        try:
            await self._surface.disable_control()
        except Exception as exc:
            logger.warning("Error disabling refresh button: %s", exc)
        return True

    async def wait_inflight(self) -> None:
        """Wait for refreshes already started (they are never cancelled)."""

        if self._inflight:
            await asyncio.gather(*list(self._inflight), return_exceptions=True)

    async def _handle(self, activation: Activation) -> None:
        try:
            card = await self._refresh()
        except Exception:
            logger.exception("Refresh lookup failed")
            card = None

        try:
            if card is None:
                await self._surface.notify(activation, self._failure_notice)
            else:
                await self._surface.replace(activation, card)
        except Exception as exc:
            logger.warning("Could not update refreshed card: %s", exc)


class RefreshSessionRegistry:
    """Running sessions of this process."""

    def __init__(self) -> None:
        self._tasks: dict[RefreshSession, asyncio.Task[None]] = {}

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def sessions(self) -> list[RefreshSession]:
        return list(self._tasks)

    def start(self, session: RefreshSession) -> asyncio.Task[None]:
        task = asyncio.create_task(session.run())
        self._tasks[session] = task
        task.add_done_callback(lambda _t, s=session: self._tasks.pop(s, None))
        return task

    async def close(self) -> None:
        """Expire every session (process shutdown)."""

        sessions = list(self._tasks.items())
        for session, _task in sessions:
            await session.expire()
        if sessions:
            await asyncio.gather(*(task for _s, task in sessions), return_exceptions=True)
        logger.info("Closed %d refresh session(s)", len(sessions))
