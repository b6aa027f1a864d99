"""Tests for the minimax search."""

import pytest

from conftest import X, O, board_from_moves
from dropfour.ai.minimax import MinimaxPlayer, WIN_SCORE
from dropfour.game.board import Board
from dropfour.utils import PlayerMark

BLANK = [0] * 7

# Player one to move and wins at column 3
WIN_ROWS = [[X, X, X, 0, 0, 0, O], [O, O, 0, 0, 0, 0, 0]] + [BLANK] * 4
# Player one to move and must block player two at column 3
BLOCK_ROWS = [[O, O, O, 0, 0, 0, X], [X, X, 0, 0, 0, 0, 0]] + [BLANK] * 4


def test_depth_must_be_positive():
    with pytest.raises(ValueError):
        MinimaxPlayer(depth=0)


@pytest.mark.parametrize("depth", [1, 2, 3, 4])
def test_takes_immediate_win_at_any_depth(depth):
    board = Board.from_rows(WIN_ROWS)
    player = MinimaxPlayer(depth=depth)
    column, score = player.search(board, PlayerMark.ONE, PlayerMark.TWO)
    assert column == 3
    assert score == WIN_SCORE + depth - 1
    assert player.last_score == score


@pytest.mark.parametrize("depth", [2, 4])
def test_blocks_opponent_win(depth):
    board = Board.from_rows(BLOCK_ROWS)
    player = MinimaxPlayer(depth=depth)
    assert player.get_move(board, PlayerMark.ONE, PlayerMark.TWO) == 3


def test_search_leaves_board_untouched(midgame_board):
    before = midgame_board.copy()
    MinimaxPlayer(depth=3).get_move(midgame_board, PlayerMark.TWO, PlayerMark.ONE)
    assert midgame_board == before


def test_full_board_has_no_move():
    board = Board.from_rows([[X, X, O, O, X, X, O], [O, O, X, X, O, O, X]] * 3)
    player = MinimaxPlayer(depth=2)
    assert player.get_move(board, PlayerMark.ONE, PlayerMark.TWO) is None
    assert player.last_score is None


@pytest.mark.parametrize("moves, depth", [
    ([], 3),
    ([3, 3, 2], 3),
    ([3, 3, 2, 4, 4, 2, 5, 1, 3], 3),
    ([0, 6, 1, 5, 3, 3], 3),
    ([3, 2, 3, 2, 4], 4),
])
def test_pruning_matches_plain_minimax(moves, depth):
    board = board_from_moves(moves)
    ai_mark = PlayerMark.ONE if len(moves) % 2 == 0 else PlayerMark.TWO

    pruned = MinimaxPlayer(depth=depth, use_pruning=True)
    plain = MinimaxPlayer(depth=depth, use_pruning=False)
    pruned_result = pruned.search(board, ai_mark, ai_mark.other())
    plain_result = plain.search(board, ai_mark, ai_mark.other())

    assert pruned_result == plain_result
    assert pruned.nodes_evaluated <= plain.nodes_evaluated
    assert plain.cutoffs == 0


# Player one has two winning columns, 0 and 6
TWO_WINS_ROWS = [[X, 0, 0, 0, 0, 0, X]] * 3 + [BLANK] * 3


@pytest.mark.parametrize("depth", [1, 2, 3])
def test_equal_wins_pick_lowest_column(depth):
    board = Board.from_rows(TWO_WINS_ROWS)
    player = MinimaxPlayer(depth=depth)
    assert player.get_move(board, PlayerMark.ONE, PlayerMark.TWO) == 0
    assert player.last_score == WIN_SCORE + depth - 1
