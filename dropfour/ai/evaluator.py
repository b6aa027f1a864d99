"""
evaluator.py - Static position scoring for the minimax search

The score looks at every run of four consecutive cells (a window) in the
four line directions and rewards windows that only one side can still
complete, plus a small bonus for owning the center column. Positive scores
favor the AI mark.
"""

from typing import Iterator

import numpy as np

from dropfour.debug import debug
from dropfour.game.board import Board
from dropfour.utils import CONNECT_N, DIRECTION_VECTORS, PlayerMark

CENTER_WEIGHT = 3
FOUR_WEIGHT = 100
THREE_WEIGHT = 5
TWO_WEIGHT = 2

_OFFSETS = np.arange(CONNECT_N)


def iter_windows(grid: np.ndarray) -> Iterator[np.ndarray]:
    """Yield every window of CONNECT_N cells along each line direction."""
    rows, cols = grid.shape
    span = CONNECT_N - 1

    for dr, dc in DIRECTION_VECTORS.values():
        for row in range(rows):
            end_row = row + span * dr
            if not 0 <= end_row < rows:
                continue
            for col in range(cols - span * dc):
                yield grid[row + _OFFSETS * dr, col + _OFFSETS * dc]


def _side_score(count: int, empty: int) -> int:
    if count == 4:
        return FOUR_WEIGHT
    if count == 3 and empty == 1:
        return THREE_WEIGHT
    if count == 2 and empty == 2:
        return TWO_WEIGHT
    return 0


def score_window(window: np.ndarray, ai_mark: PlayerMark) -> int:
    """
    Score one window for ``ai_mark``.

    A window holding pieces of both sides can never become a line and
    scores zero.
    """
    ai_count = int(np.count_nonzero(window == ai_mark.value))
    opp_count = int(np.count_nonzero(window == ai_mark.other().value))
    empty = len(window) - ai_count - opp_count

    if ai_count and opp_count:
        return 0
    return _side_score(ai_count, empty) - _side_score(opp_count, empty)


def score_position(board: Board, ai_mark: PlayerMark) -> int:
    """
    Heuristic value of a position that is not a confirmed win.

    Args:
        board: Position to score
        ai_mark: Mark the score is computed for

    Returns:
        Signed score; higher is better for ``ai_mark``
    """
    grid = board.grid
    center = grid[:, board.columns // 2]
    score = CENTER_WEIGHT * int(np.count_nonzero(center == ai_mark.value))

    for window in iter_windows(grid):
        score += score_window(window, ai_mark)

    debug.trace(f"Position score for {ai_mark.name}: {score}", "evaluator")
    return score
