from __future__ import annotations

from nimm.core.board import Board
from nimm.styles import strip_ansi


def board_from(rows: list[str]) -> Board:
    """Build a board from strings like `"...X..."` (X = present)."""

    return Board(cells=[[ch == "X" for ch in row] for row in rows])


def plain(frame: str) -> str:
    return strip_ansi(frame)


LAST_STICK = [
    ".......",
    ".......",
    ".......",
    "......X",
]
