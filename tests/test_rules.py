"""Tests for win detection."""

import random

import pytest

from conftest import X, O
from dropfour.game.board import Board
from dropfour.game.rules import has_four_in_a_row, winner_of_full_board, winning_cells
from dropfour.utils import PlayerMark

BLANK = [0] * 7


def _board(rows):
    return Board.from_rows(rows + [BLANK] * (6 - len(rows)))


@pytest.mark.parametrize("rows, cell, mark", [
    # horizontal
    ([[0, X, X, X, X, 0, 0]], (0, 4), PlayerMark.ONE),
    # vertical
    ([[0, 0, 0, 0, 0, 0, O]] * 4, (3, 6), PlayerMark.TWO),
    # diagonal up, checked from the middle of the line
    ([[X, O, O, O, 0, 0, 0],
      [0, X, O, X, 0, 0, 0],
      [0, 0, X, O, 0, 0, 0],
      [0, 0, 0, X, 0, 0, 0]], (1, 1), PlayerMark.ONE),
    # diagonal down
    ([[X, X, X, O, 0, 0, 0],
      [X, X, O, 0, 0, 0, 0],
      [O, O, 0, 0, 0, 0, 0],
      [O, 0, 0, 0, 0, 0, 0]], (3, 0), PlayerMark.TWO),
])
def test_four_in_a_row_each_direction(rows, cell, mark):
    board = _board(rows)
    assert has_four_in_a_row(board, cell[0], cell[1], mark)
    assert not has_four_in_a_row(board, cell[0], cell[1], mark.other())
    assert winner_of_full_board(board) == mark
    assert len(winning_cells(board, cell[0], cell[1], mark)) == 4


def test_three_is_not_enough():
    board = _board([[X, X, X, 0, 0, 0, 0]])
    assert not has_four_in_a_row(board, 0, 2, PlayerMark.ONE)
    assert winner_of_full_board(board) is None


def test_broken_line_is_not_a_win():
    board = _board([[X, X, O, X, X, 0, 0]])
    assert not has_four_in_a_row(board, 0, 1, PlayerMark.ONE)
    assert not has_four_in_a_row(board, 0, 3, PlayerMark.ONE)


def test_check_uses_explicit_mark_for_hypothetical_cell():
    board = _board([[X, X, X, 0, 0, 0, 0]])
    # (0, 3) is still empty; the origin counts as the mark being asked about
    assert has_four_in_a_row(board, 0, 3, PlayerMark.ONE)
    assert not has_four_in_a_row(board, 0, 3, PlayerMark.TWO)
    assert not has_four_in_a_row(board, 0, 3, PlayerMark.EMPTY)


def test_winning_cells_are_ordered_along_the_line():
    board = _board([[0, 0, 0, 0, 0, 0, 0]])
    for row in range(4):
        board.place(row, 3, PlayerMark.ONE)
    assert winning_cells(board, 3, 3, PlayerMark.ONE) == [(0, 3), (1, 3), (2, 3), (3, 3)]
    assert winning_cells(board, 1, 3, PlayerMark.TWO) == []


def test_five_in_a_row_counts():
    board = _board([[X, X, 0, X, X, 0, 0]])
    board.place(0, 2, PlayerMark.ONE)
    assert has_four_in_a_row(board, 0, 2, PlayerMark.ONE)
    assert len(winning_cells(board, 0, 2, PlayerMark.ONE)) == 5


def test_empty_and_drawn_boards_have_no_winner():
    assert winner_of_full_board(Board()) is None
    drawn = Board.from_rows([[X, X, O, O, X, X, O], [O, O, X, X, O, O, X]] * 3)
    assert winner_of_full_board(drawn) is None


@pytest.mark.parametrize("seed", range(25))
def test_move_check_agrees_with_board_scan(seed):
    rng = random.Random(seed)
    board = Board()
    mark = PlayerMark.ONE
    while board.valid_columns():
        column = rng.choice(board.valid_columns())
        row = board.lowest_empty_row(column)
        board.place(row, column, mark)
        if has_four_in_a_row(board, row, column, mark):
            assert winner_of_full_board(board) == mark
            break
        assert winner_of_full_board(board) is None
        mark = mark.other()
