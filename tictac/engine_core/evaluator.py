"""
Terminal-State Evaluator - Pure functions over a Board.

Answers three questions after every move:
- Has a line of three been completed, and by whom?
- Is the board full?
- Is the game in progress, won, or drawn?
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from .board import Board, Mark


# All possible winning lines, checked in this order
WINNING_LINES: tuple[tuple[tuple[int, int], ...], ...] = (
    # Rows
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    # Columns
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    # Diagonals
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)


class OutcomeKind(Enum):
    """Classification of a board."""
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class GameOutcome:
    """
    Derived result of a board. Recomputed after every move, never stored
    on the board itself.
    """
    kind: OutcomeKind
    winner: Mark | None = None

    @property
    def is_terminal(self) -> bool:
        return self.kind != OutcomeKind.IN_PROGRESS

    @classmethod
    def in_progress(cls) -> GameOutcome:
        return cls(kind=OutcomeKind.IN_PROGRESS)

    @classmethod
    def win(cls, mark: Mark) -> GameOutcome:
        if mark == Mark.EMPTY:
            raise ValueError("Empty mark cannot win")
        return cls(kind=OutcomeKind.WIN, winner=mark)

    @classmethod
    def draw(cls) -> GameOutcome:
        return cls(kind=OutcomeKind.DRAW)

    def __str__(self) -> str:
        if self.kind == OutcomeKind.WIN:
            return f"win({self.winner.value})"
        return self.kind.value


def _line_owner(board: Board, line: tuple[tuple[int, int], ...]) -> Mark | None:
    (r0, c0), (r1, c1), (r2, c2) = line
    first = board.cells[r0][c0]
    if first != Mark.EMPTY and first == board.cells[r1][c1] == board.cells[r2][c2]:
        return first
    return None


def check_winner(board: Board) -> Mark | None:
    """
    Get the mark that completed a line, or None.

    Rows are checked before columns before diagonals.
    """
    for line in WINNING_LINES:
        owner = _line_owner(board, line)
        if owner is not None:
            return owner
    return None


def winning_line(board: Board) -> tuple[tuple[int, int], ...] | None:
    """Get the first completed line, for highlighting."""
    for line in WINNING_LINES:
        if _line_owner(board, line) is not None:
            return line
    return None


def is_full(board: Board) -> bool:
    """True iff no Empty cell remains."""
    return all(mark != Mark.EMPTY for row in board.cells for mark in row)


def classify(board: Board) -> GameOutcome:
    """Classify a board. A win takes precedence over a full board."""
    winner = check_winner(board)
    if winner is not None:
        return GameOutcome.win(winner)
    if is_full(board):
        return GameOutcome.draw()
    return GameOutcome.in_progress()
