"""
cli.py - Command-line tools for the dropfour engine

This module provides commands for analysing a position, running AI-vs-AI
matches, benchmarking the search and validating the rules. It drives the
engine through GameSession exactly like a graphical front end would.
"""

import argparse
import random
import sys
from typing import Dict, List, Optional, Sequence, Tuple

from dropfour.ai.engine import AiEngine
from dropfour.ai.minimax import MinimaxPlayer
from dropfour.debug import debug, DebugLevel
from dropfour.game.board import Board
from dropfour.game.rules import has_four_in_a_row, winner_of_full_board
from dropfour.game.session import AiOpponent, GameSession, OutcomeKind
from dropfour.utils import ROWS, COLS, DEFAULT_SEARCH_DEPTH, Difficulty, PlayerMark

DIFFICULTY_CHOICES = [d.value for d in Difficulty]


def parse_moves(moves_str: Optional[str]) -> List[int]:
    """Parse a comma-separated column list such as ``"3,3,2"``."""
    if not moves_str:
        return []
    try:
        return [int(part) for part in moves_str.split(',') if part.strip()]
    except ValueError:
        raise ValueError(f"Moves must be comma-separated column numbers, got '{moves_str}'")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='dropfour rules engine and AI tools',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
    Examples:

    # Show what every difficulty would play after 3,3,2
    python run.py analyze --moves 3,3,2

    # Ask only the hard AI, searching 6 plies
    python run.py analyze --moves 3,3,2 --difficulty hard --depth 6

    # Play 20 games of medium (first) against hard (second)
    python run.py selfplay --first medium --second hard --games 20

    # Compare search with and without pruning
    python run.py benchmark --iterations 10

    # Run the built-in rule scenarios
    python run.py validate
    """
    )
    parser.add_argument('--rows', type=int, default=ROWS, help=f'Board rows (default: {ROWS})')
    parser.add_argument('--columns', type=int, default=COLS, help=f'Board columns (default: {COLS})')
    parser.add_argument('--depth', type=int, default=DEFAULT_SEARCH_DEPTH,
                        help=f'Hard AI search depth in plies (default: {DEFAULT_SEARCH_DEPTH})')
    parser.add_argument('--seed', type=int, default=None, help='Random seed for easy/medium AI')
    parser.add_argument('--debug', action='store_true',
                        help='Enable debug mode (equivalent to --debug_level debug)')
    parser.add_argument('--debug_level',
                        choices=[level.name.lower() for level in DebugLevel],
                        default='warning',
                        help='Logging verbosity (default: warning)')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    analyze_parser = subparsers.add_parser('analyze', help='Replay moves and ask the AI for a column')
    analyze_parser.add_argument('--moves', type=str, default='',
                                help='Comma-separated columns played so far, starting with player 1')
    analyze_parser.add_argument('--difficulty', choices=DIFFICULTY_CHOICES, default=None,
                                help='Only ask this difficulty (default: all)')

    selfplay_parser = subparsers.add_parser('selfplay', help='Run AI-vs-AI games')
    selfplay_parser.add_argument('--first', choices=DIFFICULTY_CHOICES, default='medium',
                                 help='Difficulty of player 1 (default: medium)')
    selfplay_parser.add_argument('--second', choices=DIFFICULTY_CHOICES, default='hard',
                                 help='Difficulty of player 2 (default: hard)')
    selfplay_parser.add_argument('--games', type=int, default=10, help='Number of games (default: 10)')
    selfplay_parser.add_argument('--show', action='store_true', help='Print the final board of each game')

    benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark the hard AI search')
    benchmark_parser.add_argument('--iterations', type=int, default=10,
                                  help='Number of random positions to search (default: 10)')

    subparsers.add_parser('validate', help='Run built-in rule scenarios')

    return parser


def configure_debug(args: argparse.Namespace) -> None:
    """Configure debug level based on args.debug or args.debug_level."""
    if args.debug:
        debug.configure(level=DebugLevel.DEBUG)
    else:
        debug.set_from_string(args.debug_level)


class EngineCLI:
    """Command-line front end for the dropfour engine."""

    def __init__(self, args: argparse.Namespace):
        self.args = args
        self.rng = random.Random(args.seed)

    def run(self) -> int:
        """Run the selected command and return the process exit status."""
        commands = {
            'analyze': self.analyze,
            'selfplay': self.selfplay,
            'benchmark': self.benchmark,
            'validate': self.validate,
        }
        command = commands.get(self.args.command)
        if command is None:
            print("Please specify a command. Use --help for options.")
            return 1
        try:
            return command()
        except ValueError as e:
            print(f"Error: {e}")
            return 1

    def _engine(self) -> AiEngine:
        return AiEngine(search_depth=self.args.depth, rng=self.rng)

    def analyze(self) -> int:
        """Replay a move list, then show what the AI would play next."""
        session = GameSession(self.args.rows, self.args.columns)
        for column in parse_moves(self.args.moves):
            outcome = session.attempt_move(column)
            if not outcome.accepted:
                print(f"Move {column} rejected: {outcome.kind.name}")
                print(session.board.render())
                return 1

        print(session.board.render())
        state = session.state
        if state.is_over:
            print(f"Game over: {state.result.name}")
            return 0

        print(f"To move: {state.current_player.name}")
        engine = self._engine()
        difficulties = ([Difficulty.from_string(self.args.difficulty)]
                        if self.args.difficulty else list(Difficulty))
        ai_mark = state.current_player
        for difficulty in difficulties:
            column = engine.select_move(session.board, ai_mark, ai_mark.other(), difficulty)
            line = f"{difficulty.value:>6}: column {column}"
            if difficulty == Difficulty.HARD:
                line += (f" (score {engine.minimax.last_score}, "
                         f"nodes {engine.minimax.nodes_evaluated}, "
                         f"cutoffs {engine.minimax.cutoffs})")
            print(line)
        return 0

    def play_match(self, first: Difficulty, second: Difficulty) -> GameSession:
        """Play one AI-vs-AI game to the end and return the finished session."""
        engine = self._engine()
        first_ai = AiOpponent(PlayerMark.ONE, first, engine)
        second_ai = AiOpponent(PlayerMark.TWO, second, engine)
        session = GameSession(self.args.rows, self.args.columns, ai_opponent=first_ai)

        while not session.is_over:
            session.ai_opponent = first_ai if session.current_player == PlayerMark.ONE else second_ai
            outcome = session.play_ai_turn()
            if outcome is None or not outcome.accepted:
                raise RuntimeError(f"AI failed to move on:\n{session.board.render()}")
        return session

    def selfplay(self) -> int:
        first = Difficulty.from_string(self.args.first)
        second = Difficulty.from_string(self.args.second)
        if self.args.games < 1:
            raise ValueError("--games must be at least 1")

        tally: Dict[str, int] = {'first': 0, 'second': 0, 'draw': 0}
        with debug.timer("selfplay", "cli") as timing:
            for game in range(self.args.games):
                session = self.play_match(first, second)
                winner = session.result.winner()
                if winner == PlayerMark.ONE:
                    tally['first'] += 1
                elif winner == PlayerMark.TWO:
                    tally['second'] += 1
                else:
                    tally['draw'] += 1
                debug.info(f"Game {game + 1}: {session.result.name} in {len(session.moves)} moves", "cli")
                if self.args.show:
                    print(f"\nGame {game + 1}: {session.result.name}")
                    print(session.board.render())
        elapsed = timing.elapsed

        print(f"\n{first.value} (X) vs {second.value} (O) over {self.args.games} games:")
        print(f"  X wins: {tally['first']}")
        print(f"  O wins: {tally['second']}")
        print(f"  Draws:  {tally['draw']}")
        if elapsed is not None:
            print(f"  Time:   {elapsed:.2f} seconds")
        return 0

    def _random_position(self) -> Board:
        """Play a few random non-winning moves from an empty board."""
        board = Board(self.args.rows, self.args.columns)
        mark = PlayerMark.ONE
        for _ in range(self.rng.randint(2, 10)):
            column = self.rng.choice(board.valid_columns())
            row = board.lowest_empty_row(column)
            board.place(row, column, mark)
            if has_four_in_a_row(board, row, column, mark):
                board.clear(row, column)
                break
            mark = mark.other()
        return board

    def benchmark(self) -> int:
        """Time the hard search with and without pruning on random positions."""
        if self.args.iterations < 1:
            raise ValueError("--iterations must be at least 1")

        print(f"Running benchmark with {self.args.iterations} positions at depth {self.args.depth}...")
        players = {
            'alpha-beta': MinimaxPlayer(self.args.depth, use_pruning=True),
            'plain': MinimaxPlayer(self.args.depth, use_pruning=False),
        }
        totals = {name: [0, 0.0] for name in players}
        mismatches = 0

        for _ in range(self.args.iterations):
            board = self._random_position()
            ai_mark = PlayerMark.ONE if board.count(PlayerMark.ONE) == board.count(PlayerMark.TWO) \
                else PlayerMark.TWO
            scores = []
            for name, player in players.items():
                with debug.timer(name) as timing:
                    _, score = player.search(board, ai_mark, ai_mark.other())
                totals[name][0] += player.nodes_evaluated
                totals[name][1] += timing.elapsed or 0.0
                scores.append(score)
            if scores[0] != scores[1]:
                mismatches += 1

        for name, (nodes, seconds) in totals.items():
            print(f"{name:>10}: {nodes / self.args.iterations:.0f} nodes/search, "
                  f"{seconds / self.args.iterations * 1000:.1f} ms/search")
        print(f"Score mismatches: {mismatches}")
        return 0 if mismatches == 0 else 1

    def _sized_board(self, rows_bottom_up: List[List[int]]) -> Board:
        """Pad a small bottom-left pattern out to the configured board size."""
        columns = self.args.columns
        rows = [row + [0] * (columns - len(row)) for row in rows_bottom_up]
        rows += [[0] * columns] * (self.args.rows - len(rows))
        return Board.from_rows(rows)

    def _draw_board(self) -> Board:
        # Pairs of columns alternate, and every row flips, so no line reaches four
        one, two = PlayerMark.ONE.value, PlayerMark.TWO.value
        return Board.from_rows([
            [one if (col // 2 + row) % 2 == 0 else two for col in range(self.args.columns)]
            for row in range(self.args.rows)
        ])

    def validation_scenarios(self) -> List[Tuple[str, Board, Optional[PlayerMark]]]:
        """Boards of the configured size paired with the winner a whole-board scan should report."""
        one, two = PlayerMark.ONE.value, PlayerMark.TWO.value
        return [
            ("horizontal", self._sized_board([[one, one, one, one]]), PlayerMark.ONE),
            ("vertical", self._sized_board([[two]] * 4), PlayerMark.TWO),
            ("diagonal up", self._sized_board([
                [one, two, two, two],
                [0, one, two, one],
                [0, 0, one, two],
                [0, 0, 0, one],
            ]), PlayerMark.ONE),
            ("diagonal down", self._sized_board([
                [one, one, one, two],
                [one, one, two],
                [two, two],
                [two],
            ]), PlayerMark.TWO),
            ("three only", self._sized_board([[one, one, one]]), None),
            ("broken line", self._sized_board([[one, one, two, one]]), None),
            ("full draw", self._draw_board(), None),
        ]

    def validate(self) -> int:
        """Run all rule scenarios and print a pass/fail summary."""
        print("Running rule validation scenarios...")
        passed = 0
        scenarios = self.validation_scenarios()
        for name, board, expected in scenarios:
            result = winner_of_full_board(board)
            ok = result == expected
            passed += ok
            print(f"  {name}: {'PASSED' if ok else 'FAILED'}")
            if not ok:
                print(f"    Expected: {expected}, Got: {result}")
                print(board.render())

        # Column capacity: the (rows + 1)-th drop into one column is rejected
        session = GameSession(self.args.rows, self.args.columns)
        kinds = [session.attempt_move(0).kind for _ in range(session.rows + 1)]
        ok = kinds[-1] == OutcomeKind.COLUMN_FULL and OutcomeKind.COLUMN_FULL not in kinds[:-1]
        passed += ok
        print(f"  column capacity: {'PASSED' if ok else 'FAILED'}")

        total = len(scenarios) + 1
        print(f"\nValidation summary: {passed}/{total} scenarios passed")
        return 0 if passed == total else 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_debug(args)
    if args.command is None:
        parser.print_help()
        return 1
    return EngineCLI(args).run()


if __name__ == "__main__":
    sys.exit(main())
