from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from contextlib import suppress
from uuid import uuid4

from nimm.core.events import InputEvent, TickEvent
from nimm.dispatch import dispatch
from nimm.fsm import SessionFSM
from nimm.render import render
from nimm.state import SessionState

logger = logging.getLogger(__name__)

FrameSink = Callable[[str], Awaitable[None]]

# Queued by `drop()` to wake the loop when the transport goes away.
_DROPPED = object()


class GameSession:
    """One connection's game: its state, event queue, clock ticker and render loop.

    Contract:
      - the transport pushes decoded events with `feed(event)` and calls `drop()` on disconnect.
      - `run()` emits a full frame on start and after every processed event, in arrival order.
      - the clock ticker lives exactly as long as `run()`; every exit path cancels it.
    """

    def __init__(
        self,
        *,
        state: SessionState,
        sink: FrameSink,
        tick_seconds: float = 1.0,
        session_id: str | None = None,
    ) -> None:
        self.session_id = session_id or uuid4().hex[:12]
        self.state = state
        self.fsm = SessionFSM()
        self.opened_at = time.monotonic()
        self._sink = sink
        self._tick_seconds = tick_seconds
        self._queue: asyncio.Queue[object] = asyncio.Queue()
        self._ticker: asyncio.Task[None] | None = None
        self._task: asyncio.Task[object] | None = None

    @property
    def finished(self) -> bool:
        """True when the player quit (as opposed to the connection dropping)."""

        return self.fsm.current_state_value == "finished"

    @property
    def closed(self) -> bool:
        return self.fsm.is_closed

    @property
    def ticker(self) -> asyncio.Task[None] | None:
        return self._ticker

    @property
    def task(self) -> asyncio.Task[object] | None:
        """The task running `run()`, once it has started."""

        return self._task

    def uptime(self) -> float:
        return time.monotonic() - self.opened_at

    def feed(self, event: InputEvent) -> None:
        if self.closed:
            return
        self._queue.put_nowait(event)

    def drop(self) -> None:
        if self.closed:
            return
        self._queue.put_nowait(_DROPPED)

    def cancel(self) -> None:
        """Force the session loop to stop (used at process shutdown)."""

        if self._task is not None and not self._task.done():
            self._task.cancel()

    async def _tick_forever(self) -> None:
        while True:
            await asyncio.sleep(self._tick_seconds)
            self._queue.put_nowait(TickEvent.now())

    async def run(self) -> None:
        if self.closed:
            return

        self._task = asyncio.current_task()
        self.fsm.activate()
        self._ticker = asyncio.create_task(self._tick_forever(), name=f"nimm-tick-{self.session_id}")
        try:
            await self._sink(render(self.state))
            while True:
                event = await self._queue.get()
                if event is _DROPPED:
                    break
                if not dispatch(self.state, event):  # type: ignore[arg-type]
                    self.fsm.quit()
                    break
                await self._sink(render(self.state))
        finally:
            self._ticker.cancel()
            with suppress(asyncio.CancelledError):
                await self._ticker
            if not self.closed:
                self.fsm.drop()
            logger.debug("session %s loop stopped (%s)", self.session_id, self.fsm.current_state_value)
