"""Layout engine: turns a session's state into one complete text frame.

Every call produces the full screen; there is no diffing. The function is pure:
it reads the state and never mutates it.
"""

from __future__ import annotations

import textwrap
from dataclasses import replace

from nimm.core.game import Game
from nimm.state import SessionState
from nimm.styles import MARKED, cursor_style, normal_style, rules_style, title_style

TITLE = "== Nimm =="
RULES = (
    "Nim is a mathematical game of strategy in which two players take turns removing "
    '(or "nimming") objects from distinct heaps or piles. On each turn, a player must '
    "remove at least one object, and may remove any number of objects provided they all "
    "come from the same heap or pile. The goal of the game is to avoid taking the last object."
)

# Widths used to centre each block.
TITLE_WIDTH = 11
STATUS_WIDTH = 15
BOARD_WIDTH = 24
FULL_HELP_WIDTH = 34
RULES_MARGIN = 12
RULES_INDENT = 4
FRAME_INDENT = 2
# Lines of the frame that are not counted by the vertical fill.
RESERVED_LINES = 4


def center_pad(width: int, content_width: int) -> int:
    return max(width - content_width, 0) // 2


def indent(text: str, n: int) -> str:
    """Indent every non-empty line of `text` by `n` spaces."""

    if n <= 0:
        return text
    pad = " " * n
    return "\n".join(pad + line if line else line for line in text.split("\n"))


def wrap(text: str, limit: int) -> list[str]:
    if limit < 1:
        return [text]
    return textwrap.wrap(text, width=limit, break_long_words=False, break_on_hyphens=False)


def status_line(game: Game) -> str:
    if game.is_over:
        return f"Player {game.player} lost  "
    return f"Player {game.player}'s turn"


def render_board(game: Game) -> str:
    board = game.board
    out = ""
    for row in range(board.rows):
        for col in range(board.cols):
            style = normal_style
            if row == game.cursor.row and col == game.cursor.col:
                style = cursor_style
            if game.selection.contains(row, col):
                style = replace(style, foreground=MARKED)
            mark = "X" if board.is_present(row, col) else " "
            out += "  " + style.render(mark)
        out += "\n"
    return out


def render(state: SessionState) -> str:
    width = state.width
    game = state.game

    s = indent(title_style.render(TITLE), center_pad(width, TITLE_WIDTH))
    s += "\n\n"
    rules = "\n".join(rules_style.render(line) for line in wrap(RULES, width - RULES_MARGIN))
    s += indent(rules, RULES_INDENT)
    s += "\n\n"
    s += indent(status_line(game), center_pad(width, STATUS_WIDTH)) + "\n\n"
    s += indent(render_board(game), center_pad(width, BOARD_WIDTH))

    help_indent = center_pad(width, FULL_HELP_WIDTH if state.help.show_all else BOARD_WIDTH)
    help_view = indent(state.help.view(state.keys), help_indent)

    fill = max(state.height - RESERVED_LINES - s.count("\n") - help_view.count("\n"), 0)
    return indent("\n" + s + "\n" * fill + help_view, FRAME_INDENT)
