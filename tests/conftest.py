"""Shared fixtures for the dropfour tests."""

import random
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dropfour.game.board import Board
from dropfour.utils import PlayerMark

X = PlayerMark.ONE.value
O = PlayerMark.TWO.value


def board_from_moves(moves, rows=6, columns=7):
    """Drop alternating marks (player one first) into the given columns."""
    board = Board(rows, columns)
    mark = PlayerMark.ONE
    for column in moves:
        board.place(board.lowest_empty_row(column), column, mark)
        mark = mark.other()
    return board


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def midgame_board():
    return board_from_moves([3, 3, 2, 4, 4, 2, 5, 1, 3])
