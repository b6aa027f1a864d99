"""
board.py - Board representation for the dropfour engine

The Board is a plain grid of cell occupancy. Row 0 is the bottom row, so a
column fills from index 0 upward. The board does not know whose turn it is
or whether anybody has won; that lives in the session and the rules module.
"""

from typing import List, Optional, Sequence

import numpy as np

from dropfour.debug import debug
from dropfour.utils import ROWS, COLS, MIN_DIMENSION, PlayerMark, render_board_ascii


class Board:
    """
    A fixed-size Connect Four grid.

    Cells above an empty cell in the same column are always empty. The
    board keeps that invariant only as long as callers place marks in the
    row returned by ``lowest_empty_row``.
    """

    def __init__(self, rows: int = ROWS, columns: int = COLS):
        if rows < MIN_DIMENSION or columns < MIN_DIMENSION:
            raise ValueError(
                f"Board must be at least {MIN_DIMENSION}x{MIN_DIMENSION}, got {rows}x{columns}")
        debug.trace(f"Creating {rows}x{columns} board", "board")
        self.rows = rows
        self.columns = columns
        self.grid = np.zeros((rows, columns), dtype=np.int8)

    @classmethod
    def from_rows(cls, rows_bottom_up: Sequence[Sequence[int]]) -> 'Board':
        """
        Build a board from nested lists of mark values, bottom row first.

        Raises:
            ValueError: If rows are ragged, a value is not a mark, or a
                mark sits above an empty cell
        """
        raw = np.array(rows_bottom_up)
        if raw.ndim != 2:
            raise ValueError("Board rows must all have the same length")

        board = cls(raw.shape[0], raw.shape[1])
        valid_values = {mark.value for mark in PlayerMark}
        if not set(np.unique(raw).tolist()) <= valid_values:
            raise ValueError(f"Cell values must be one of {sorted(valid_values)}")

        # Values are checked before the narrowing cast
        grid = raw.astype(np.int8)
        empty = grid == PlayerMark.EMPTY.value
        floating = ~empty[1:] & empty[:-1]
        if floating.any():
            row, col = np.argwhere(floating)[0]
            raise ValueError(f"Mark at ({row + 1}, {col}) has no support below it")

        board.grid = grid
        return board

    def copy(self) -> 'Board':
        new_board = Board(self.rows, self.columns)
        new_board.grid = self.grid.copy()
        return new_board

    def snapshot(self) -> np.ndarray:
        """Return a copy of the raw grid for read-only consumers."""
        return self.grid.copy()

    def get(self, row: int, column: int) -> PlayerMark:
        return PlayerMark(int(self.grid[row, column]))

    def is_column_in_range(self, column: int) -> bool:
        return 0 <= column < self.columns

    def is_position_in_range(self, row: int, column: int) -> bool:
        return 0 <= row < self.rows and 0 <= column < self.columns

    def lowest_empty_row(self, column: int) -> Optional[int]:
        """
        Find where a piece dropped into ``column`` would land.

        Returns:
            The lowest empty row index, or None if the column is full
        """
        for row in range(self.rows):
            if self.grid[row, column] == PlayerMark.EMPTY.value:
                return row
        return None

    def valid_columns(self) -> List[int]:
        """Columns that still accept a piece, in ascending order."""
        top = self.grid[self.rows - 1]
        return [col for col in range(self.columns) if top[col] == PlayerMark.EMPTY.value]

    def place(self, row: int, column: int, mark: PlayerMark) -> None:
        """
        Write ``mark`` into an empty cell.

        The caller picks ``row`` with ``lowest_empty_row``; only the
        empty-cell precondition is checked here.
        """
        if self.grid[row, column] != PlayerMark.EMPTY.value:
            raise ValueError(f"Cell ({row}, {column}) is already occupied")
        self.grid[row, column] = mark.value

    def clear(self, row: int, column: int) -> None:
        """Reset a cell to empty. Only used to take back a simulated move."""
        self.grid[row, column] = PlayerMark.EMPTY.value

    def is_full(self) -> bool:
        # Gravity means a full top row implies a full board
        return bool(np.all(self.grid[self.rows - 1] != PlayerMark.EMPTY.value))

    def count(self, mark: PlayerMark) -> int:
        return int(np.count_nonzero(self.grid == mark.value))

    def render(self) -> str:
        return render_board_ascii(self.grid)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid.shape == other.grid.shape and bool(np.array_equal(self.grid, other.grid))

    def __repr__(self) -> str:
        return f"Board(rows={self.rows}, columns={self.columns}, pieces={int(np.count_nonzero(self.grid))})"

    def __str__(self) -> str:
        return self.render()
