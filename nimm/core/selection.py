from __future__ import annotations

from dataclasses import dataclass

from nimm.core.board import Board


@dataclass(slots=True)
class Selection:
    """In-progress choice of a contiguous column span within one row.

    `marked_row` is `None` when no row is marked. `marked_range` is either `None`
    or an inclusive `(lo, hi)` pair with `lo <= hi`.
    """

    marked_row: int | None = None
    marked_range: tuple[int, int] | None = None

    @property
    def is_empty(self) -> bool:
        return self.marked_range is None

    def contains(self, row: int, col: int) -> bool:
        if self.marked_range is None or row != self.marked_row:
            return False
        lo, hi = self.marked_range
        return lo <= col <= hi

    def clear(self) -> None:
        self.marked_row = None
        self.marked_range = None

    def toggle(self, board: Board, row: int, col: int) -> None:
        """Toggle the cell at `(row, col)`.

        - removed cell: nothing happens
        - different row than the marked one: start over on that row
        - click inside the current range: cancel the whole selection
        - click outside it: extend the range to cover the new column

        The range may span removed cells; only its endpoints matter.
        """

        if not board.is_present(row, col):
            return

        if self.marked_row != row:
            self.marked_range = None
        self.marked_row = row

        if self.marked_range is not None:
            lo, hi = self.marked_range
            if lo <= col <= hi:
                self.marked_range = None
                return

        marked = sorted([*(self.marked_range or ()), col])
        self.marked_range = (marked[0], marked[-1])
