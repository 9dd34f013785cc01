from __future__ import annotations

from dataclasses import dataclass, field

ROWS = 4
COLS = 7


def _triangle_cells(*, rows: int, cols: int) -> list[list[bool]]:
    # Row i holds 2*i+1 sticks, centred in the shared column span.
    cells: list[list[bool]] = []
    for row in range(rows):
        width = 2 * row + 1
        start = (cols - width) // 2
        cells.append([start <= col < start + width for col in range(cols)])
    return cells


@dataclass(slots=True)
class Board:
    """Grid of removable sticks.

    A cell is either present (`True`) or removed (`False`). Removal is monotonic:
    nothing in this class ever sets a cell back to present.
    """

    cells: list[list[bool]] = field(default_factory=lambda: _triangle_cells(rows=ROWS, cols=COLS))

    @classmethod
    def triangle(cls) -> "Board":
        return cls(cells=_triangle_cells(rows=ROWS, cols=COLS))

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_present(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and self.cells[row][col]

    def is_exhausted(self, row: int) -> bool:
        return not any(self.cells[row])

    def available_count(self) -> int:
        return sum(1 for row in self.cells for present in row if present)

    def count_outside(self, *, row: int, lo: int, hi: int) -> int:
        """Count present cells that are not inside `row[lo..hi]`."""

        total = 0
        for r, columns in enumerate(self.cells):
            for c, present in enumerate(columns):
                if not present:
                    continue
                if r == row and lo <= c <= hi:
                    continue
                total += 1
        return total

    def clear_range(self, row: int, lo: int, hi: int) -> None:
        """Remove every stick in `row[lo..hi]` (inclusive).

        Already removed cells are left as they are. Columns outside the board are ignored.
        """

        columns = self.cells[row]
        for col in range(max(lo, 0), min(hi, self.cols - 1) + 1):
            columns[col] = False
