"""
Move System - Moves, results, and the single mutation path.

All board changes made during play flow through apply_move:
the move is validated, applied, and the board is classified
before control passes onward.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging

from .board import Board, Mark, InvalidMove
from .evaluator import GameOutcome, classify

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Move:
    """A mark placed at (row, col)."""
    row: int
    col: int
    mark: Mark

    @property
    def cell(self) -> tuple[int, int]:
        return (self.row, self.col)


@dataclass
class MoveResult:
    """
    Result of applying a move.

    Contains:
    - Whether the move was applied
    - The board classification after the move (if applied)
    - Error message and code (if rejected)
    """
    success: bool
    move: Move | None = None
    outcome: GameOutcome | None = None
    error: str | None = None
    error_code: str | None = None

    # Human-readable changes, for presentation
    changes: list[str] = field(default_factory=list)

    @classmethod
    def failure(cls, error: str, error_code: str | None = None,
                move: Move | None = None) -> MoveResult:
        """Create a failure result."""
        return cls(success=False, move=move, error=error, error_code=error_code)

    @classmethod
    def applied(cls, move: Move, outcome: GameOutcome) -> MoveResult:
        """Create a success result."""
        return cls(
            success=True,
            move=move,
            outcome=outcome,
            changes=[f"{move.mark.value} placed at ({move.row}, {move.col})"],
        )


def apply_move(board: Board, move: Move) -> MoveResult:
    """
    Apply a move and classify the resulting board.

    An invalid move is reported in the result and leaves the board
    unchanged.
    """
    try:
        board.place_mark(move.row, move.col, move.mark)
    except InvalidMove as e:
        logger.debug("Rejected move %s: %s", move, e)
        return MoveResult.failure(str(e), e.error_code, move=move)

    outcome = classify(board)
    logger.debug("Applied %s -> %s", move, outcome)
    return MoveResult.applied(move, outcome)
