"""
Bot Policy - Interface for bot decision-making.

A BotPolicy takes a board and the two marks in play and returns a
decision. Policies never leave a change on the board: any look-ahead
is done through Board.probe, which restores the probed cell.

A policy asked to move on a full board has no legal move. It logs a
warning and returns None instead of failing.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any
import logging
import random

from ..engine_core.board import Board, Mark

logger = logging.getLogger(__name__)


@dataclass
class BotDecision:
    """
    A decision made by a bot.

    Contains:
    - The cell to play
    - Explanation (for UI/debugging)
    - Search statistics
    """
    row: int
    col: int
    explanation: str = ""

    # Evaluation details (for debugging)
    evaluated_moves: int = 0
    best_score: float | None = None
    evaluation_details: dict[str, Any] = field(default_factory=dict)

    @property
    def cell(self) -> tuple[int, int]:
        return (self.row, self.col)


class BotPolicy(ABC):
    """
    Abstract base class for bot policies.

    A policy defines how a bot selects a move.
    Implementations range from uniform random choice
    to exhaustive game-tree search.
    """

    @abstractmethod
    def select_move(
        self,
        board: Board,
        bot_mark: Mark,
        human_mark: Mark,
    ) -> BotDecision | None:
        """
        Select a move for the bot.

        Args:
            board: Current board (left unchanged)
            bot_mark: Mark the bot plays
            human_mark: Mark the opponent plays

        Returns:
            BotDecision with the selected cell, or None if the board
            has no Empty cell
        """
        pass

    def get_name(self) -> str:
        """Get the bot's name/identifier."""
        return self.__class__.__name__


class RandomPolicy(BotPolicy):
    """
    Random policy - selects an Empty cell uniformly at random.

    Used for:
    - Easy difficulty
    - Fallback for the other policies
    """

    def __init__(self, seed: int | None = None, rng: random.Random | None = None):
        self.rng = rng if rng is not None else random.Random(seed)

    def select_move(
        self,
        board: Board,
        bot_mark: Mark,
        human_mark: Mark,
    ) -> BotDecision | None:
        empties = board.empty_cells()
        if not empties:
            logger.warning("No legal move on a full board; %s plays nothing", bot_mark.value)
            return None

        row, col = self.rng.choice(empties)
        return BotDecision(
            row=row,
            col=col,
            explanation="Selected randomly",
            evaluated_moves=len(empties),
        )
