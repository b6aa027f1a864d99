"""
dropfour.game - Core game mechanics

This package contains the board representation, the win rules and the
turn state machine.
"""

from dropfour.game.board import Board
from dropfour.game.rules import has_four_in_a_row, winner_of_full_board, winning_cells
from dropfour.game.session import (AiOpponent, GameSession, MoveOutcome, OutcomeKind,
                                   SessionEvent, SessionState)

__all__ = ['Board', 'has_four_in_a_row', 'winner_of_full_board', 'winning_cells',
           'AiOpponent', 'GameSession', 'MoveOutcome', 'OutcomeKind',
           'SessionEvent', 'SessionState']
