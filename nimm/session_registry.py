from __future__ import annotations

import asyncio
import logging

from nimm.session import GameSession

logger = logging.getLogger(__name__)


class SessionRegistry:
    """In-process index of live sessions keyed by session id.

    Sessions never share game state; the registry exists so process shutdown can
    find sessions that outlived the grace period and cancel them (and their tickers).
    """

    def __init__(self) -> None:
        self._sessions: dict[str, GameSession] = {}
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session: object) -> bool:
        return isinstance(session, GameSession) and session.session_id in self._sessions

    async def add(self, session: GameSession) -> None:
        async with self._lock:
            self._sessions[session.session_id] = session

    async def discard(self, session: GameSession) -> None:
        async with self._lock:
            self._sessions.pop(session.session_id, None)

    async def close_all(self) -> int:
        async with self._lock:
            sessions = list(self._sessions.values())
            self._sessions.clear()

        tasks: list[asyncio.Task[object]] = []
        for session in sessions:
            logger.warning("forcing session %s closed at shutdown", session.session_id)
            session.cancel()
            if session.task is not None and session.task is not asyncio.current_task():
                tasks.append(session.task)

        # Let each session run its cleanup (ticker cancel, FSM drop) before returning.
        await asyncio.gather(*tasks, return_exceptions=True)
        return len(sessions)


registry = SessionRegistry()
