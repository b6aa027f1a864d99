"""Tests for the board."""

import numpy as np
import pytest

from conftest import X, O, board_from_moves
from dropfour.game.board import Board
from dropfour.utils import PlayerMark


def test_new_board_is_empty():
    board = Board()
    assert (board.rows, board.columns) == (6, 7)
    assert board.count(PlayerMark.EMPTY) == 42
    assert board.valid_columns() == list(range(7))
    assert all(board.lowest_empty_row(c) == 0 for c in range(7))
    assert not board.is_full()


@pytest.mark.parametrize("rows, columns", [(3, 7), (6, 3), (0, 0)])
def test_board_rejects_small_dimensions(rows, columns):
    with pytest.raises(ValueError):
        Board(rows, columns)


def test_pieces_stack_from_the_bottom():
    board = Board()
    for expected_row in range(board.rows):
        row = board.lowest_empty_row(2)
        assert row == expected_row
        board.place(row, 2, PlayerMark.ONE)
    assert board.lowest_empty_row(2) is None
    assert 2 not in board.valid_columns()


def test_place_on_occupied_cell_raises():
    board = Board()
    board.place(0, 0, PlayerMark.ONE)
    with pytest.raises(ValueError):
        board.place(0, 0, PlayerMark.TWO)


def test_clear_takes_back_a_piece():
    board = Board()
    board.place(0, 4, PlayerMark.TWO)
    board.clear(0, 4)
    assert board == Board()
    assert board.lowest_empty_row(4) == 0


def test_is_full_checks_top_row():
    rows = [[X, X, O, O, X, X, O], [O, O, X, X, O, O, X]] * 3
    board = Board.from_rows(rows)
    assert board.is_full()
    assert board.valid_columns() == []

    board.clear(5, 3)
    assert not board.is_full()
    assert board.valid_columns() == [3]


def test_from_rows_rejects_floating_piece():
    rows = [[0] * 7 for _ in range(6)]
    rows[1][2] = X
    with pytest.raises(ValueError):
        Board.from_rows(rows)


def test_from_rows_rejects_unknown_values():
    rows = [[0] * 7 for _ in range(6)]
    rows[0][0] = 7
    with pytest.raises(ValueError):
        Board.from_rows(rows)


@pytest.mark.parametrize("value", [300, 256, -1])
def test_from_rows_rejects_values_outside_int8_marks(value):
    with pytest.raises(ValueError):
        Board.from_rows([[value, 0, 0, 0]] * 4)


def test_copy_is_independent():
    board = board_from_moves([3, 3, 4])
    clone = board.copy()
    assert clone == board

    clone.place(clone.lowest_empty_row(0), 0, PlayerMark.TWO)
    assert clone != board
    assert board.get(0, 0) == PlayerMark.EMPTY


def test_snapshot_is_a_copy():
    board = board_from_moves([1])
    snap = board.snapshot()
    snap[0, 1] = O
    assert board.get(0, 1) == PlayerMark.ONE
    assert isinstance(snap, np.ndarray)


def test_render_prints_top_row_first():
    board = board_from_moves([0, 0])
    lines = board.render().splitlines()
    assert lines[6] == "|X . . . . . .|"
    assert lines[5] == "|O . . . . . .|"
    assert lines[-1] == "|0 1 2 3 4 5 6|"
