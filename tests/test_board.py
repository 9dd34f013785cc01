from __future__ import annotations

from nimm.core.board import COLS, ROWS, Board

from helpers import board_from


def test_fresh_board_is_a_centred_triangle() -> None:
    board = Board.triangle()

    assert (board.rows, board.cols) == (ROWS, COLS)
    assert [sum(row) for row in board.cells] == [1, 3, 5, 7]
    assert board.cells[0] == [False, False, False, True, False, False, False]
    assert board.cells[2] == [False, True, True, True, True, True, False]
    assert board.available_count() == 16


def test_default_constructor_matches_triangle() -> None:
    assert Board().cells == Board.triangle().cells


def test_clear_range_only_touches_addressed_row() -> None:
    board = Board.triangle()
    board.clear_range(3, 2, 4)

    assert board.cells[3] == [True, True, False, False, False, True, True]
    assert [sum(row) for row in board.cells[:3]] == [1, 3, 5]
    assert board.available_count() == 13


def test_clear_range_is_idempotent_on_removed_cells() -> None:
    board = Board.triangle()
    board.clear_range(2, 0, 6)
    board.clear_range(2, 0, 6)

    assert board.is_exhausted(2)
    assert board.available_count() == 11


def test_is_present_outside_board_is_false() -> None:
    board = Board.triangle()

    assert board.is_present(0, 3)
    assert not board.is_present(0, 0)
    assert not board.is_present(-1, 3)
    assert not board.is_present(4, 0)
    assert not board.is_present(3, 7)


def test_count_outside_skips_range_and_removed_cells() -> None:
    board = board_from(
        [
            "...X...",
            "..X.X..",
            ".......",
            "XXX....",
        ]
    )

    assert board.count_outside(row=3, lo=0, hi=2) == 3
    assert board.count_outside(row=1, lo=2, hi=4) == 4
    assert board.count_outside(row=0, lo=0, hi=6) == 5
