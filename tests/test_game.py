from __future__ import annotations

import pytest

from nimm.core.game import Cursor, Direction, Game

from helpers import LAST_STICK, board_from


def _select(game: Game, row: int, col: int) -> None:
    game.cursor = Cursor(row=row, col=col)
    game.toggle_select()


def test_cursor_is_clamped_to_board(game: Game) -> None:
    for _ in range(10):
        game.cursor_move(Direction.up)
        game.cursor_move(Direction.left)
    assert (game.cursor.row, game.cursor.col) == (0, 0)

    for _ in range(10):
        game.cursor_move(Direction.down)
        game.cursor_move(Direction.right)
    assert (game.cursor.row, game.cursor.col) == (3, 6)


def test_cursor_moves_over_removed_cells_without_touching_selection(game: Game) -> None:
    _select(game, 3, 3)
    game.cursor = Cursor()

    game.cursor_move(Direction.right)

    assert (game.cursor.row, game.cursor.col) == (0, 1)
    assert game.selection.marked_range == (3, 3)


def test_submit_without_selection_is_a_noop(game: Game) -> None:
    assert game.submit_move() is False
    assert game.player == 1
    assert game.board.available_count() == 16


def test_accepted_move_clears_range_and_passes_turn(game: Game) -> None:
    _select(game, 3, 0)
    _select(game, 3, 2)
    assert game.selection.marked_range == (0, 2)

    assert game.submit_move() is True

    assert game.board.cells[3] == [False, False, False, True, True, True, True]
    assert (game.cursor.row, game.cursor.col) == (0, 0)
    assert game.selection.is_empty
    assert game.selection.marked_row is None
    assert game.player == 2
    assert game.board.available_count() == 13


def test_players_alternate_between_one_and_two(game: Game) -> None:
    seen = [game.player]
    for row in (3, 2, 1):
        _select(game, row, 3)
        assert game.submit_move()
        seen.append(game.player)

    assert seen == [1, 2, 1, 2]


def test_move_that_would_clear_the_board_is_rejected() -> None:
    game = Game(board=board_from(["...X...", ".......", ".......", "XX....."]))
    _select(game, 0, 3)
    assert game.submit_move()
    assert game.player == 2

    _select(game, 3, 0)
    _select(game, 3, 1)
    assert game.remaining_after_selection() == 0

    assert game.submit_move() is False
    assert game.board.available_count() == 2
    assert game.player == 2
    assert game.selection.marked_range == (0, 1)


def test_last_stick_freezes_the_game() -> None:
    game = Game(board=board_from(LAST_STICK), player=2)
    assert game.is_over

    _select(game, 3, 6)
    assert game.selection.marked_range == (6, 6)

    for _ in range(3):
        assert game.submit_move() is False

    assert game.board.available_count() == 1
    assert game.player == 2
    assert game.is_over


def test_is_over_is_derived_from_the_board(game: Game) -> None:
    assert not game.is_over
    game.board = board_from(LAST_STICK)
    assert game.is_over


@pytest.mark.parametrize("direction", list(Direction))
def test_cursor_move_never_changes_board(game: Game, direction: Direction) -> None:
    game.cursor_move(direction)
    assert game.board.available_count() == 16
