"""
Engine Core - Board state, moves and terminal-state evaluation.

The engine is the runtime that:
1. Owns the 3x3 Board
2. Applies validated moves
3. Classifies the board after every move
"""

from .board import Board, Mark, InvalidMove, BOARD_SIZE
from .evaluator import (
    GameOutcome,
    OutcomeKind,
    WINNING_LINES,
    check_winner,
    is_full,
    classify,
    winning_line,
)
from .move import Move, MoveResult, apply_move

__all__ = [
    "Board",
    "Mark",
    "InvalidMove",
    "BOARD_SIZE",
    "GameOutcome",
    "OutcomeKind",
    "WINNING_LINES",
    "check_winner",
    "is_full",
    "classify",
    "winning_line",
    "Move",
    "MoveResult",
    "apply_move",
]
