from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """A decoded key press, named the way terminal key decoders name them (`up`, `k`, `enter`, `ctrl+c`)."""

    key: str


@dataclass(frozen=True, slots=True)
class ResizeEvent:
    width: int
    height: int


@dataclass(frozen=True, slots=True)
class TickEvent:
    at: datetime

    @staticmethod
    def now() -> "TickEvent":
        return TickEvent(at=datetime.now(timezone.utc))


InputEvent = KeyEvent | ResizeEvent | TickEvent
