from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum

from nimm.core.board import Board
from nimm.core.selection import Selection

logger = logging.getLogger(__name__)


class Direction(StrEnum):
    up = "up"
    down = "down"
    left = "left"
    right = "right"


_STEPS: dict[Direction, tuple[int, int]] = {
    Direction.up: (-1, 0),
    Direction.down: (1, 0),
    Direction.left: (0, -1),
    Direction.right: (0, 1),
}


@dataclass(slots=True)
class Cursor:
    row: int = 0
    col: int = 0


@dataclass(slots=True)
class Game:
    """One game of Nim: board, cursor, pending selection and whose turn it is.

    There is no stored game-over flag. The game is over when exactly one stick is
    left (`is_over`); from then on every submit is rejected because it would clear
    the board, so the position simply freezes.
    """

    board: Board = field(default_factory=Board.triangle)
    cursor: Cursor = field(default_factory=Cursor)
    selection: Selection = field(default_factory=Selection)
    player: int = 1

    @property
    def is_over(self) -> bool:
        return self.board.available_count() == 1

    def cursor_move(self, direction: Direction) -> None:
        d_row, d_col = _STEPS[direction]
        self.cursor.row = min(max(self.cursor.row + d_row, 0), self.board.rows - 1)
        self.cursor.col = min(max(self.cursor.col + d_col, 0), self.board.cols - 1)

    def toggle_select(self) -> None:
        self.selection.toggle(self.board, self.cursor.row, self.cursor.col)

    def remaining_after_selection(self) -> int:
        """Sticks that would be left on the board if the current selection were taken."""

        if self.selection.marked_range is None or self.selection.marked_row is None:
            return self.board.available_count()
        lo, hi = self.selection.marked_range
        return self.board.count_outside(row=self.selection.marked_row, lo=lo, hi=hi)

    def submit_move(self) -> bool:
        """Take the selected sticks and pass the turn.

        Returns `False` (and changes nothing) when nothing is selected or when the
        move would leave the board empty.
        """

        if self.selection.marked_range is None or self.selection.marked_row is None:
            return False

        if self.remaining_after_selection() == 0:
            logger.debug("rejected move for player %d: it would clear the board", self.player)
            return False

        lo, hi = self.selection.marked_range
        self.board.clear_range(self.selection.marked_row, lo, hi)

        self.cursor = Cursor()
        self.selection.clear()
        self.player = self.player % 2 + 1
        return True
