"""
Tictac CLI - Command-line interface for the engine.

Usage:
    tictac play [--difficulty LEVEL] [--first | --second] [--seed N]
    tictac suggest <board> --bot-mark O [--difficulty LEVEL]
    tictac suggest --bot-mark O -- <board>

The board for `suggest` is written as three rows, e.g. "XX./OO./...".
Empty cells are '.' or '-'. A board starting with '-' must follow '--'
so it is not read as an option.
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from .config import Settings, configure_logging
from .console import Console, render_board
from .engine_core.board import Board, Mark
from .engine_core.evaluator import classify
from .bots.difficulty import Difficulty, bot_move
from .schemas import RoundConfig
from .session.manager import Session

logger = logging.getLogger(__name__)

DIFFICULTY_CHOICES = [d.value for d in Difficulty]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Tictac - Tic-Tac-Toe against a bot",
        prog="tictac",
    )
    parser.add_argument("--log-level", help="Logging level (overrides TICTAC_LOG_LEVEL)")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play against the bot")
    play_parser.add_argument("--difficulty", "-d", choices=DIFFICULTY_CHOICES,
                             help="Bot difficulty (asked each round if omitted)")
    order = play_parser.add_mutually_exclusive_group()
    order.add_argument("--first", dest="human_first", action="store_true", default=None,
                       help="You move first and play X")
    order.add_argument("--second", dest="human_first", action="store_false", default=None,
                       help="The bot moves first; you play O")
    play_parser.add_argument("--seed", type=int, help="Seed for the bot's random choices")

    # Suggest command
    suggest_parser = subparsers.add_parser("suggest", help="Show the bot's move for a board")
    suggest_parser.add_argument(
        "board",
        help="Board rows, e.g. 'XX./OO./...' ('.' or '-' for empty; put '--' before a board starting with '-')",
    )
    suggest_parser.add_argument("--bot-mark", choices=["X", "O"], required=True)
    suggest_parser.add_argument("--difficulty", "-d", choices=DIFFICULTY_CHOICES, default="hard")
    suggest_parser.add_argument("--seed", type=int, help="Seed for random choices")

    return parser


def main(argv=None, console: Console | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    console = console or Console()

    try:
        settings = Settings.from_env()
    except ValueError as e:
        console.say(f"Error: {e}")
        return 2

    configure_logging(args.log_level or settings.log_level)
    logger.debug("Settings: %s", settings)

    if args.command == "play":
        return cmd_play(args, settings, console)
    elif args.command == "suggest":
        return cmd_suggest(args, settings, console)

    parser.print_help()
    return 1


def cmd_play(args, settings: Settings, console: Console) -> int:
    """Run the interactive game until the player stops."""
    seed = args.seed if args.seed is not None else settings.seed
    difficulty = args.difficulty or settings.difficulty
    session = Session(seed=seed)

    console.say("Tic Tac Toe (You vs Bot)")
    try:
        while True:
            try:
                config = ask_round_config(console, difficulty, args.human_first)
            except ValidationError as e:
                console.say(f"Error: {e}")
                return 2

            play_round(session, config, console)

            console.say()
            console.show_score(session.tally)
            if not console.read_yes_no("Play again? (y/n): "):
                break
    except (EOFError, KeyboardInterrupt):
        console.say()
    finally:
        session.end()

    console.say("Thanks for playing!")
    return 0


def ask_round_config(console: Console, difficulty, human_first) -> RoundConfig:
    """Ask for anything not fixed on the command line."""
    if difficulty is None:
        console.say("Select difficulty: 1) Easy  2) Medium  3) Hard")
        difficulty = console.read_int_in_range("Enter 1-3: ", 1, 3)
    if human_first is None:
        human_first = console.read_yes_no("Do you want to go first? (y/n): ")
    return RoundConfig(difficulty=difficulty, human_first=human_first)


def play_round(session: Session, config: RoundConfig, console: Console):
    """Play one round and record it in the session tally."""
    loop = session.start_round(config.difficulty, human_first=config.human_first)

    def human_move(board, last):
        console.say()
        console.show_board(board)
        return console.read_move(board, last)

    loop.run(human_move, on_turn=console.show_turn)

    console.say()
    console.show_board(loop.board)
    result = session.finish_round(loop)
    console.show_result(result)
    return result


def mark_to_move(board: Board) -> Mark | None:
    """X moves first, so X is to move when the counts are equal."""
    cells = [mark for row in board.rows() for mark in row]
    x_count = cells.count(Mark.X)
    o_count = cells.count(Mark.O)
    if x_count == o_count:
        return Mark.X
    if x_count == o_count + 1:
        return Mark.O
    return None


def cmd_suggest(args, settings: Settings, console: Console) -> int:
    """Print the move a bot would play on the given board."""
    import random

    try:
        board = Board.from_rows(args.board)
    except ValueError as e:
        console.say(f"Error: {e}")
        return 2

    outcome = classify(board)
    if outcome.is_terminal:
        console.say(f"Error: board is already finished ({outcome})")
        return 1

    bot_mark = Mark(args.bot_mark)
    to_move = mark_to_move(board)
    if to_move is None:
        console.say("Error: mark counts are impossible (X moves first, then turns alternate)")
        return 2
    if to_move != bot_mark:
        console.say(f"Error: it is {to_move.value}'s turn, not {bot_mark.value}'s")
        return 2

    difficulty = Difficulty.parse(args.difficulty)
    seed = args.seed if args.seed is not None else settings.seed

    decision = bot_move(
        board, difficulty, bot_mark, bot_mark.opponent(), rng=random.Random(seed)
    )

    console.say(f"Move: {decision.row} {decision.col}")
    console.say(f"Reason: {decision.explanation}")
    console.say(render_board(board))
    return 0


if __name__ == "__main__":
    sys.exit(main())
