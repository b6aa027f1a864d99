"""
utils.py - Constants, enumerations and helpers for the dropfour engine

This module holds the game-wide configuration constants, the enumerations
shared by the board, the session and the AI, and the ASCII renderer used
by the command-line tools.
"""

from enum import Enum, auto
from typing import Optional

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win
MIN_DIMENSION = 4  # Smallest board side that can hold a line of four

# AI defaults
DEFAULT_SEARCH_DEPTH = 4


class PlayerMark(Enum):
    """Occupant of a cell. EMPTY marks a free cell and is never a player."""
    EMPTY = 0
    ONE = 1    # First player
    TWO = 2    # Second player

    def other(self) -> 'PlayerMark':
        """Get the opposing mark (EMPTY has no opponent)."""
        if self == PlayerMark.ONE:
            return PlayerMark.TWO
        elif self == PlayerMark.TWO:
            return PlayerMark.ONE
        return PlayerMark.EMPTY

    @property
    def is_player(self) -> bool:
        return self != PlayerMark.EMPTY

    def __str__(self):
        if self == PlayerMark.EMPTY:
            return "."
        elif self == PlayerMark.ONE:
            return "X"
        else:
            return "O"


class GameResult(Enum):
    """State of a game session."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        return self != GameResult.IN_PROGRESS

    def winner(self) -> Optional[PlayerMark]:
        if self == GameResult.PLAYER_ONE_WIN:
            return PlayerMark.ONE
        if self == GameResult.PLAYER_TWO_WIN:
            return PlayerMark.TWO
        return None

    @staticmethod
    def win_for(mark: PlayerMark) -> 'GameResult':
        if mark == PlayerMark.ONE:
            return GameResult.PLAYER_ONE_WIN
        if mark == PlayerMark.TWO:
            return GameResult.PLAYER_TWO_WIN
        raise ValueError("An empty cell cannot win")


class Difficulty(Enum):
    """Selects which move-selection strategy the AI runs."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def from_string(cls, value: str) -> 'Difficulty':
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown difficulty '{value}' (expected one of: {choices})")


class Direction(Enum):
    """Line directions used for win checks and window scoring."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_UP = auto()    # bottom-left to top-right
    DIAGONAL_DOWN = auto()  # top-left to bottom-right


# Direction vectors (row, col); row 0 is the bottom of the board
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_UP: (1, 1),
    Direction.DIAGONAL_DOWN: (-1, 1),
}


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a grid as ASCII art, top row first.

    Args:
        grid: Board grid with row 0 at the bottom

    Returns:
        Multi-line string with column numbers underneath
    """
    rows, cols = grid.shape
    border = "|" + "-" * (cols * 2 - 1) + "|"
    lines = [border]

    for row in range(rows - 1, -1, -1):
        cells = [str(PlayerMark(int(value))) for value in grid[row]]
        lines.append("|" + " ".join(cells) + "|")

    lines.append(border)
    lines.append("|" + " ".join(str(col % 10) for col in range(cols)) + "|")
    return "\n".join(lines)
