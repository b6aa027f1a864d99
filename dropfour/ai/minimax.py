"""
minimax.py - Minimax algorithm with alpha-beta pruning for dropfour

This module provides a MinimaxPlayer class that searches the game tree to a
fixed depth and scores cutoff positions with the window evaluator.

The search:
1. Works on its own copy of the board and undoes every simulated move
2. Scores wins as WIN_SCORE plus the remaining depth, so faster wins rank higher
3. Tries columns in ascending order and keeps the first column with the best score
4. Can run without pruning, which gives the same values with more nodes
"""

import math
from typing import Optional, Tuple

from dropfour.ai.evaluator import score_position
from dropfour.debug import debug
from dropfour.game.board import Board
from dropfour.game.rules import has_four_in_a_row
from dropfour.utils import DEFAULT_SEARCH_DEPTH, PlayerMark

WIN_SCORE = 1000


class MinimaxPlayer:
    """
    A dropfour player that uses the minimax algorithm with alpha-beta pruning.

    This player evaluates positions by searching the game tree up to a specified
    depth, assuming both players play optimally.
    """

    def __init__(self, depth: int = DEFAULT_SEARCH_DEPTH, use_pruning: bool = True):
        """
        Initialize the minimax player.

        Args:
            depth: Search depth in plies, at least 1
            use_pruning: Skip branches that cannot change the result
        """
        if depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {depth}")
        self.depth = depth
        self.use_pruning = use_pruning
        # Stats from the last search
        self.nodes_evaluated = 0
        self.cutoffs = 0
        self.last_score: Optional[float] = None

    def get_move(self, board: Board, ai_mark: PlayerMark, human_mark: PlayerMark) -> Optional[int]:
        """
        Get the best column for ``ai_mark``.

        Returns:
            The column index, or None if the board has no open column
        """
        column, _ = self.search(board, ai_mark, human_mark)
        return column

    def search(self, board: Board, ai_mark: PlayerMark,
               human_mark: PlayerMark) -> Tuple[Optional[int], float]:
        """
        Run the search from the root position.

        Args:
            board: Position with ``ai_mark`` to move; left untouched
            ai_mark: Maximizing side
            human_mark: Minimizing side

        Returns:
            (best column, its score); the column is None when no move exists
        """
        self.nodes_evaluated = 0
        self.cutoffs = 0
        work = board.copy()

        best_column = None
        best_score = -math.inf
        alpha = -math.inf
        beta = math.inf

        with debug.timer("minimax_search", "minimax") as timing:
            for column in work.valid_columns():
                score = self._explore(work, column, ai_mark, self.depth - 1, alpha, beta,
                                      False, ai_mark, human_mark)
                debug.trace(f"Root column {column} scored {score}", "minimax")

                # Strict comparison keeps the first column on ties
                if score > best_score:
                    best_score = score
                    best_column = column

                if self.use_pruning:
                    alpha = max(alpha, best_score)

        self.last_score = best_score if best_column is not None else None
        debug.debug(f"Depth {self.depth} search for {ai_mark.name}: column {best_column}, "
                    f"score {best_score}, nodes {self.nodes_evaluated}, "
                    f"cutoffs {self.cutoffs}, {timing.elapsed or 0:.3f}s", "minimax")
        return best_column, best_score

    def _explore(self, board: Board, column: int, mark: PlayerMark, depth: int,
                 alpha: float, beta: float, is_maximizing: bool,
                 ai_mark: PlayerMark, human_mark: PlayerMark) -> float:
        """Simulate ``mark`` in ``column``, score the child node, then undo."""
        row = board.lowest_empty_row(column)
        board.place(row, column, mark)
        try:
            return self._minimax(board, depth, alpha, beta, is_maximizing,
                                 (row, column, mark), ai_mark, human_mark)
        finally:
            board.clear(row, column)

    def _minimax(self, board: Board, depth: int, alpha: float, beta: float,
                 is_maximizing: bool, last_move: Tuple[int, int, PlayerMark],
                 ai_mark: PlayerMark, human_mark: PlayerMark) -> float:
        """
        Minimax algorithm with alpha-beta pruning.

        Args:
            board: Current board state
            depth: Remaining search depth
            alpha: Best score the maximizer can guarantee so far
            beta: Best score the minimizer can guarantee so far
            is_maximizing: True if ``ai_mark`` moves at this node
            last_move: (row, column, mark) of the move that produced this node

        Returns:
            The evaluation score for this position
        """
        self.nodes_evaluated += 1

        # Expansion stops at the first win, so only the last move can have won
        row, column, mover = last_move
        if has_four_in_a_row(board, row, column, mover):
            if mover == ai_mark:
                return WIN_SCORE + depth
            return -WIN_SCORE - depth

        if depth == 0 or board.is_full():
            return score_position(board, ai_mark)

        if is_maximizing:
            max_score = -math.inf
            for child in board.valid_columns():
                score = self._explore(board, child, ai_mark, depth - 1, alpha, beta,
                                      False, ai_mark, human_mark)
                max_score = max(max_score, score)
                if self.use_pruning:
                    alpha = max(alpha, score)
                    # Beta cutoff
                    if beta <= alpha:
                        self.cutoffs += 1
                        break
            return max_score

        else:  # Minimizing
            min_score = math.inf
            for child in board.valid_columns():
                score = self._explore(board, child, human_mark, depth - 1, alpha, beta,
                                      True, ai_mark, human_mark)
                min_score = min(min_score, score)
                if self.use_pruning:
                    beta = min(beta, score)
                    # Alpha cutoff
                    if beta <= alpha:
                        self.cutoffs += 1
                        break
            return min_score
