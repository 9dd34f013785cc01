from __future__ import annotations

from nimm.core.events import InputEvent, KeyEvent, ResizeEvent, TickEvent
from nimm.core.game import Direction
from nimm.state import SessionState


def dispatch(state: SessionState, event: InputEvent) -> bool:
    """Apply one input event to the session state.

    Returns `False` when the event asks to end the session, `True` otherwise.
    Invalid actions (selecting a removed stick, illegal submits, moving off the
    board) are silent no-ops.
    """

    if isinstance(event, TickEvent):
        state.time = event.at
        return True

    if isinstance(event, ResizeEvent):
        state.width = event.width
        state.height = event.height
        state.help.width = event.width
        return True

    if isinstance(event, KeyEvent):
        return _handle_key(state, event.key)

    return True


def _handle_key(state: SessionState, key: str) -> bool:
    keys = state.keys
    game = state.game

    if keys.quit.matches(key):
        return False
    if keys.submit.matches(key):
        game.submit_move()
    elif keys.select.matches(key):
        game.toggle_select()
    elif keys.down.matches(key):
        game.cursor_move(Direction.down)
    elif keys.up.matches(key):
        game.cursor_move(Direction.up)
    elif keys.right.matches(key):
        game.cursor_move(Direction.right)
    elif keys.left.matches(key):
        game.cursor_move(Direction.left)
    elif keys.help.matches(key):
        state.help.show_all = not state.help.show_all
    return True
