from __future__ import annotations

from nimm.core.board import Board
from nimm.core.selection import Selection

from helpers import board_from


def test_first_click_marks_single_cell() -> None:
    sel = Selection()
    sel.toggle(Board.triangle(), 3, 5)

    assert sel.marked_row == 3
    assert sel.marked_range == (5, 5)
    assert sel.contains(3, 5)
    assert not sel.contains(2, 5)


def test_same_cell_twice_cancels() -> None:
    board = Board.triangle()
    sel = Selection()

    sel.toggle(board, 3, 0)
    sel.toggle(board, 3, 0)

    assert sel.is_empty
    assert board.available_count() == 16


def test_extend_then_interior_click_cancels() -> None:
    board = Board.triangle()
    sel = Selection()

    sel.toggle(board, 2, 1)
    sel.toggle(board, 2, 4)
    assert sel.marked_range == (1, 4)

    sel.toggle(board, 2, 2)
    assert sel.marked_range is None


def test_click_outside_extends_toward_new_extreme() -> None:
    board = Board.triangle()
    sel = Selection()

    sel.toggle(board, 3, 3)
    sel.toggle(board, 3, 5)
    sel.toggle(board, 3, 1)

    assert sel.marked_range == (1, 5)

    sel.toggle(board, 3, 6)
    assert sel.marked_range == (1, 6)


def test_clicking_removed_cell_is_a_noop() -> None:
    board = Board.triangle()
    sel = Selection()
    sel.toggle(board, 3, 2)

    sel.toggle(board, 0, 0)

    assert sel.marked_row == 3
    assert sel.marked_range == (2, 2)


def test_switching_rows_starts_a_new_selection() -> None:
    board = Board.triangle()
    sel = Selection()
    sel.toggle(board, 3, 0)
    sel.toggle(board, 3, 4)

    sel.toggle(board, 1, 3)

    assert sel.marked_row == 1
    assert sel.marked_range == (3, 3)
    assert not sel.contains(3, 2)


def test_range_may_straddle_removed_cells() -> None:
    board = board_from(
        [
            "...X...",
            "..XXX..",
            ".XXXXX.",
            "XX...XX",
        ]
    )
    sel = Selection()
    sel.toggle(board, 3, 0)
    sel.toggle(board, 3, 6)

    assert sel.marked_range == (0, 6)
    assert sel.contains(3, 3)


def test_range_stays_ordered_and_in_bounds() -> None:
    board = Board.triangle()
    sel = Selection()
    for col in (6, 0, 6, 3, 2, 5, 1, 4, 0):
        sel.toggle(board, 3, col)
        if sel.marked_range is not None:
            lo, hi = sel.marked_range
            assert 0 <= lo <= hi < board.cols


def test_clear_resets_to_sentinel() -> None:
    sel = Selection()
    sel.toggle(Board.triangle(), 3, 3)
    sel.clear()

    assert sel.marked_row is None
    assert sel.is_empty
