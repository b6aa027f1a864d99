"""
rules.py - Win detection for the dropfour engine

All checks here are pure functions of the board and an explicit mark, so the
session and the AI can test hypothetical moves for either player without
touching any shared turn state.
"""

from typing import List, Optional, Tuple

from dropfour.debug import debug
from dropfour.game.board import Board
from dropfour.utils import CONNECT_N, DIRECTION_VECTORS, PlayerMark

Cell = Tuple[int, int]


def _walk(board: Board, row: int, column: int, dr: int, dc: int,
          mark: PlayerMark) -> List[Cell]:
    """Collect consecutive ``mark`` cells stepping away from (row, column)."""
    cells = []
    r, c = row + dr, column + dc
    while board.is_position_in_range(r, c) and board.grid[r, c] == mark.value:
        cells.append((r, c))
        r += dr
        c += dc
    return cells


def winning_cells(board: Board, row: int, column: int, mark: PlayerMark) -> List[Cell]:
    """
    Get the line of ``mark`` through (row, column) that reaches four.

    The origin cell counts as ``mark`` whatever it holds, so this can be
    asked right after placing a piece there.

    Returns:
        Cells of the first completed line ordered along its direction, or
        an empty list if no direction reaches four
    """
    if not mark.is_player:
        return []

    for direction, (dr, dc) in DIRECTION_VECTORS.items():
        backward = _walk(board, row, column, -dr, -dc, mark)
        forward = _walk(board, row, column, dr, dc, mark)
        if len(backward) + 1 + len(forward) >= CONNECT_N:
            debug.trace(f"{mark.name} completes {direction.name} line at ({row}, {column})", "rules")
            return list(reversed(backward)) + [(row, column)] + forward

    return []


def has_four_in_a_row(board: Board, row: int, column: int, mark: PlayerMark) -> bool:
    """
    Check whether ``mark`` at (row, column) is part of four in a row.

    Args:
        board: Board to inspect
        row: Row of the cell just played
        column: Column of the cell just played
        mark: Mark to test for

    Returns:
        True if any of the four directions totals at least four
    """
    if not mark.is_player:
        return False

    for dr, dc in DIRECTION_VECTORS.values():
        count = 1 + len(_walk(board, row, column, dr, dc, mark)) \
                  + len(_walk(board, row, column, -dr, -dc, mark))
        if count >= CONNECT_N:
            return True
    return False


def winner_of_full_board(board: Board) -> Optional[PlayerMark]:
    """
    Scan every occupied cell for a completed line.

    Returns:
        The mark of the first winning line found in row-major order from
        the bottom row, or None if nobody has four in a row
    """
    for row in range(board.rows):
        for column in range(board.columns):
            value = board.grid[row, column]
            if value == PlayerMark.EMPTY.value:
                continue
            mark = PlayerMark(int(value))
            if has_four_in_a_row(board, row, column, mark):
                return mark
    return None
