from __future__ import annotations

import asyncio
import logging
from contextlib import suppress

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect, status
from pydantic import ValidationError

from nimm import __version__
from nimm.api.models import ByeMessage, FatalMessage, FrameMessage, InfoResponse, client_message_adapter
from nimm.session import GameSession
from nimm.session_registry import registry
from nimm.settings import Settings, get_settings
from nimm.state import SessionState

logger = logging.getLogger(__name__)

router = APIRouter()

NO_TERMINAL = "no active terminal, skipping"


async def _read_events(websocket: WebSocket, session: GameSession) -> None:
    """Decode client messages into input events until the client goes away.

    Binary frames and messages that fail validation are logged and skipped. However
    the reader stops (other than being cancelled), the session is dropped so its
    loop and ticker end with it.
    """

    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break

            raw = message.get("text")
            if raw is None:
                logger.warning("session %s: ignoring non-text frame", session.session_id)
                continue
            try:
                client_message = client_message_adapter.validate_json(raw)
            except ValidationError as e:
                logger.warning("session %s: ignoring malformed message (%d errors)", session.session_id, e.error_count())
                continue
            session.feed(client_message.to_event())
    except asyncio.CancelledError:
        raise
    except Exception:
        logger.exception("session %s: input reader failed", session.session_id)
    session.drop()


@router.websocket("/ws/play")
async def play_ws(
    websocket: WebSocket,
    term: str = "",
    width: int | None = None,
    height: int | None = None,
    settings: Settings = Depends(get_settings),
) -> None:
    await websocket.accept()

    if width is None or height is None or width < 0 or height < 0:
        await websocket.send_json(FatalMessage(message=NO_TERMINAL).model_dump())
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    async def _send_frame(frame: str) -> None:
        await websocket.send_json(FrameMessage(frame=frame).model_dump())

    session = GameSession(
        state=SessionState(term=term, width=width, height=height),
        sink=_send_frame,
        tick_seconds=settings.tick_seconds,
    )
    await registry.add(session)
    logger.info("session %s opened term=%s size=%dx%d", session.session_id, term or "-", width, height)

    reader = asyncio.create_task(_read_events(websocket, session), name=f"nimm-read-{session.session_id}")
    try:
        await session.run()
    except WebSocketDisconnect:
        logger.info("session %s: client went away mid-frame", session.session_id)
    except Exception:
        logger.exception("session %s failed", session.session_id)
        raise
    finally:
        reader.cancel()
        with suppress(asyncio.CancelledError):
            await reader
        await registry.discard(session)
        logger.info(
            "session %s closed (%s) after %.1fs",
            session.session_id,
            session.fsm.current_state_value,
            session.uptime(),
        )

    if session.finished:
        await websocket.send_json(ByeMessage().model_dump())
        await websocket.close()


@router.get("/healthcheck")
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/info", response_model=InfoResponse)
async def info() -> InfoResponse:
    return InfoResponse(name="nimm", version=__version__)


@router.get("/sessions")
async def sessions_count() -> dict[str, int]:
    """Number of live sessions in this process."""

    return {"live": len(registry)}
