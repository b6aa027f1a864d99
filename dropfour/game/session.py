"""
session.py - Turn state machine for a dropfour game

GameSession owns the board, tracks whose turn it is and whether the game
has finished. ``attempt_move`` is the only way to change the board, and
every call produces a MoveOutcome value instead of raising. A session can
optionally carry an AI opponent that plays one of the two marks.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Callable, List, Optional, Tuple

import numpy as np

from dropfour.debug import debug
from dropfour.game.board import Board
from dropfour.game.rules import winning_cells
from dropfour.utils import ROWS, COLS, Difficulty, GameResult, PlayerMark

if TYPE_CHECKING:
    from dropfour.ai.engine import AiEngine


class OutcomeKind(Enum):
    CONTINUED = auto()
    WON = auto()
    DRAWN = auto()
    COLUMN_FULL = auto()
    INVALID_COLUMN = auto()
    GAME_OVER = auto()


REJECTED_KINDS = frozenset({OutcomeKind.COLUMN_FULL, OutcomeKind.INVALID_COLUMN,
                            OutcomeKind.GAME_OVER})


@dataclass(frozen=True)
class MoveOutcome:
    """
    Result of a move attempt.

    ``player`` is the player to move next for CONTINUED and the winner for
    WON; it is None otherwise. ``row`` is only set for accepted moves.
    """
    kind: OutcomeKind
    column: int
    player: Optional[PlayerMark] = None
    row: Optional[int] = None
    winning_cells: Tuple[Tuple[int, int], ...] = ()

    @property
    def accepted(self) -> bool:
        return self.kind not in REJECTED_KINDS

    @property
    def ends_game(self) -> bool:
        return self.kind in (OutcomeKind.WON, OutcomeKind.DRAWN)


class SessionEvent(Enum):
    MOVE = auto()
    READY = auto()


Listener = Callable[[SessionEvent, Optional[MoveOutcome]], None]


@dataclass(frozen=True)
class SessionState:
    """Read-only view of a session for rendering."""
    board: np.ndarray
    current_player: PlayerMark
    is_over: bool
    result: GameResult
    move_count: int
    last_move: Optional[Tuple[int, int]]


@dataclass
class AiOpponent:
    """AI collaborator bound to one mark of a session."""
    mark: PlayerMark
    difficulty: Difficulty = Difficulty.HARD
    engine: Optional['AiEngine'] = None

    def __post_init__(self):
        if not self.mark.is_player:
            raise ValueError("AI opponent needs a player mark")
        if self.engine is None:
            from dropfour.ai.engine import AiEngine
            self.engine = AiEngine()


class GameSession:
    """
    Connect Four game state machine.

    Starts in progress with PlayerMark.ONE to move. A win or a full board
    ends the game; after that only ``restart`` changes anything.
    """

    def __init__(self, rows: int = ROWS, columns: int = COLS,
                 ai_opponent: Optional[AiOpponent] = None):
        self.rows = rows
        self.columns = columns
        self.ai_opponent = ai_opponent
        self._listeners: List[Listener] = []
        self._reset_state()
        debug.debug(f"New {rows}x{columns} session"
                    f"{' vs AI ' + ai_opponent.difficulty.value if ai_opponent else ''}", "session")

    def _reset_state(self) -> None:
        self.board = Board(self.rows, self.columns)
        self.current_player = PlayerMark.ONE
        self.result = GameResult.IN_PROGRESS
        self.moves: List[int] = []
        self.last_move: Optional[Tuple[int, int]] = None

    @property
    def is_over(self) -> bool:
        return self.result.is_game_over()

    @property
    def state(self) -> SessionState:
        return SessionState(
            board=self.board.snapshot(),
            current_player=self.current_player,
            is_over=self.is_over,
            result=self.result,
            move_count=len(self.moves),
            last_move=self.last_move,
        )

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, event: SessionEvent, outcome: Optional[MoveOutcome] = None) -> None:
        for listener in list(self._listeners):
            listener(event, outcome)

    def attempt_move(self, column: int) -> MoveOutcome:
        """
        Drop the current player's piece into ``column``.

        Args:
            column: Target column index

        Returns:
            WON, DRAWN or CONTINUED for an accepted move; GAME_OVER,
            INVALID_COLUMN or COLUMN_FULL when the move is rejected and
            nothing changed
        """
        outcome = self._apply_move(column)
        self._emit(SessionEvent.MOVE, outcome)
        return outcome

    def _apply_move(self, column: int) -> MoveOutcome:
        if self.is_over:
            debug.debug(f"Rejected column {column}: game is over ({self.result.name})", "session")
            return MoveOutcome(OutcomeKind.GAME_OVER, column)

        if not self.board.is_column_in_range(column):
            debug.debug(f"Rejected column {column}: out of range", "session")
            return MoveOutcome(OutcomeKind.INVALID_COLUMN, column)

        row = self.board.lowest_empty_row(column)
        if row is None:
            debug.debug(f"Rejected column {column}: column is full", "session")
            return MoveOutcome(OutcomeKind.COLUMN_FULL, column)

        mover = self.current_player
        self.board.place(row, column, mover)
        self.moves.append(column)
        self.last_move = (row, column)
        debug.debug(f"{mover.name} played ({row}, {column})", "session")

        line = winning_cells(self.board, row, column, mover)
        if line:
            self.result = GameResult.win_for(mover)
            debug.info(f"{mover.name} wins after {len(self.moves)} moves", "session")
            return MoveOutcome(OutcomeKind.WON, column, player=mover, row=row,
                               winning_cells=tuple(line))

        if self.board.is_full():
            self.result = GameResult.DRAW
            debug.info("Board is full, game drawn", "session")
            return MoveOutcome(OutcomeKind.DRAWN, column, row=row)

        self.current_player = mover.other()
        return MoveOutcome(OutcomeKind.CONTINUED, column, player=self.current_player, row=row)

    def restart(self) -> None:
        """Throw away the board and start over with PlayerMark.ONE to move."""
        debug.debug("Restarting session", "session")
        self._reset_state()
        self._emit(SessionEvent.READY)

    @property
    def is_ai_turn(self) -> bool:
        return (self.ai_opponent is not None and not self.is_over
                and self.current_player == self.ai_opponent.mark)

    def play_ai_turn(self) -> Optional[MoveOutcome]:
        """
        Let the AI opponent choose and play a column.

        Returns:
            The move outcome, or None when it is not the AI's turn or the
            engine found no legal column
        """
        if not self.is_ai_turn:
            return None

        opponent = self.ai_opponent
        column = opponent.engine.select_move(
            self.board.copy(), opponent.mark, opponent.mark.other(), opponent.difficulty)
        if column is None:
            return None
        return self.attempt_move(column)
