from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from nimm.core.game import Game
from nimm.help_view import HelpView
from nimm.keys import DEFAULT_KEYS, KeyMap


@dataclass(slots=True)
class SessionState:
    """Everything one connection's game loop reads and mutates.

    Each connection owns its own instance; nothing here is shared between sessions.
    """

    term: str
    width: int
    height: int
    game: Game = field(default_factory=Game)
    help: HelpView = field(default_factory=HelpView)
    keys: KeyMap = DEFAULT_KEYS

    # Updated by clock ticks but never rendered.
    time: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
