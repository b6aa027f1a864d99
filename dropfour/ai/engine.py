"""
engine.py - Move selection for the dropfour AI opponent

AiEngine picks a column for a given mark using one of three strategies:
random (easy), one-move greedy (medium) or minimax search (hard). Every
strategy works on a copy of the board it is given, so the caller's board is
identical before and after a call.
"""

import random
from typing import Optional

from dropfour.ai.minimax import MinimaxPlayer
from dropfour.debug import debug
from dropfour.game.board import Board
from dropfour.game.rules import has_four_in_a_row
from dropfour.utils import DEFAULT_SEARCH_DEPTH, Difficulty, PlayerMark


class AiEngine:
    """Selects a column for the AI according to a difficulty level."""

    def __init__(self, search_depth: int = DEFAULT_SEARCH_DEPTH,
                 rng: Optional[random.Random] = None,
                 use_pruning: bool = True):
        self.rng = rng or random.Random()
        self.minimax = MinimaxPlayer(depth=search_depth, use_pruning=use_pruning)

    @property
    def search_depth(self) -> int:
        return self.minimax.depth

    def select_move(self, board: Board, ai_mark: PlayerMark, human_mark: PlayerMark,
                    difficulty: Difficulty) -> Optional[int]:
        """
        Choose a column for ``ai_mark``.

        Args:
            board: Current position; not modified
            ai_mark: Mark the AI plays
            human_mark: Mark of the opponent
            difficulty: Strategy to use

        Returns:
            A column with room for a piece, or None if there is none
        """
        work = board.copy()
        if not work.valid_columns():
            debug.warning("AI asked to move on a board with no open column", "engine")
            return None

        if difficulty == Difficulty.EASY:
            column = self.select_easy(work)
        elif difficulty == Difficulty.MEDIUM:
            column = self.select_medium(work, ai_mark, human_mark)
        else:
            column = self.select_hard(work, ai_mark, human_mark)

        debug.debug(f"{difficulty.value} AI ({ai_mark.name}) chose column {column}", "engine")
        return column

    def select_easy(self, board: Board) -> Optional[int]:
        """Pick uniformly among the open columns."""
        columns = board.valid_columns()
        if not columns:
            return None
        return self.rng.choice(columns)

    def _completing_column(self, board: Board, mark: PlayerMark) -> Optional[int]:
        """First column, ascending, where ``mark`` would complete four in a row."""
        for column in board.valid_columns():
            row = board.lowest_empty_row(column)
            board.place(row, column, mark)
            try:
                if has_four_in_a_row(board, row, column, mark):
                    return column
            finally:
                board.clear(row, column)
        return None

    def select_medium(self, board: Board, ai_mark: PlayerMark,
                      human_mark: PlayerMark) -> Optional[int]:
        """
        Greedy choice without lookahead: win now, else block an immediate
        opponent win, else take the center, else play randomly.
        """
        column = self._completing_column(board, ai_mark)
        if column is not None:
            debug.trace(f"Medium: winning move at column {column}", "engine")
            return column

        column = self._completing_column(board, human_mark)
        if column is not None:
            debug.trace(f"Medium: blocking column {column}", "engine")
            return column

        center = board.columns // 2
        if board.lowest_empty_row(center) is not None:
            return center

        return self.select_easy(board)

    def select_hard(self, board: Board, ai_mark: PlayerMark,
                    human_mark: PlayerMark) -> Optional[int]:
        """Minimax search to the configured depth."""
        return self.minimax.get_move(board, ai_mark, human_mark)
