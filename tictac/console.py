"""
Console - Text presentation and prompts for the interactive game.

Renders boards, outcomes and the score line, and reads validated
input (menu choices, yes/no answers, moves) from the player.
Input and output functions are injectable so the console can be
driven from tests.
"""

from __future__ import annotations
from typing import Callable

from .engine_core.board import Board, BOARD_SIZE
from .schemas import BoardSnapshot, TallyInfo
from .session.game_loop import TurnResult
from .session.manager import RoundResult, SessionTally

RESULT_MESSAGES = {
    RoundResult.WIN: "You win!",
    RoundResult.LOSS: "Bot wins.",
    RoundResult.DRAW: "It's a draw.",
}


def render_board(board: Board) -> str:
    """Board with row and column indices, e.g. '0 X - O'."""
    snapshot = BoardSnapshot.from_board(board)
    header = "  " + " ".join(str(col) for col in range(BOARD_SIZE))
    lines = [header]
    for index, row in enumerate(snapshot.rows):
        lines.append(f"{index} " + " ".join(row))
    return "\n".join(lines)


def render_score(tally: SessionTally) -> str:
    info = TallyInfo.from_tally(tally)
    return f"Score -> Wins: {info.wins}  Losses: {info.losses}  Draws: {info.draws}"


class Console:
    """
    Reads player input and prints game state.

    Usage:
        console = Console()
        difficulty = console.read_int_in_range("Enter 1-3: ", 1, 3)
        console.show_board(board)
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        self.input_fn = input_fn
        self.output_fn = output_fn

    def say(self, message: str = ""):
        self.output_fn(message)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def show_board(self, board: Board):
        self.say(render_board(board))

    def show_result(self, result: RoundResult):
        self.say(RESULT_MESSAGES[result])

    def show_score(self, tally: SessionTally):
        self.say(render_score(tally))

    def show_turn(self, turn: TurnResult):
        """Report a bot move or a rejected human move."""
        if not turn.success:
            self.say(f"{turn.error} Try again.")
        elif turn.by_bot:
            self.say(f"Bot played ({turn.move.row}, {turn.move.col}).")

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def read_int_in_range(self, prompt: str, min_val: int, max_val: int) -> int:
        """Ask until the player enters an integer in [min_val, max_val]."""
        while True:
            text = self.input_fn(prompt).strip()
            try:
                value = int(text)
            except ValueError:
                value = None
            if value is not None and min_val <= value <= max_val:
                return value
            self.say("Invalid input. Try again.")

    def read_yes_no(self, prompt: str) -> bool:
        """Ask until the player answers y or n."""
        while True:
            text = self.input_fn(prompt).strip().lower()
            if text[:1] == "y":
                return True
            if text[:1] == "n":
                return False
            self.say("Please enter y or n.")

    def read_move(self, board: Board, last: TurnResult | None = None) -> tuple[int, int]:
        """Ask until the player enters an on-grid, Empty cell as 'row col'."""
        while True:
            parts = self.input_fn(
                f"Enter move as 'row col' (0-{BOARD_SIZE - 1} 0-{BOARD_SIZE - 1}): "
            ).split()
            try:
                row, col = (int(p) for p in parts)
            except ValueError:
                self.say("Invalid input. Try again.")
                continue

            if not board.in_bounds(row, col):
                self.say("Out of range. Try again.")
            elif not board.is_valid_move(row, col):
                self.say("Cell occupied. Try again.")
            else:
                return row, col
