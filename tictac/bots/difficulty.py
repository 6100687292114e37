"""
Difficulty - Selects the bot policy for a game.

Each difficulty maps to exactly one policy:
- easy:   RandomPolicy
- medium: HeuristicPolicy
- hard:   MinimaxPolicy

The difficulty is chosen once per game and used for every bot turn.
"""

from __future__ import annotations
from enum import Enum
import logging
import random

from ..engine_core.board import Board, Mark
from .policy import BotPolicy, BotDecision, RandomPolicy
from .heuristic import HeuristicPolicy
from .minimax import MinimaxPolicy

logger = logging.getLogger(__name__)


class Difficulty(Enum):
    """Bot difficulty levels, in menu order."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def from_menu(cls, choice: int) -> Difficulty:
        """Map the console menu number (1-3) to a difficulty."""
        order = list(cls)
        if not 1 <= choice <= len(order):
            raise ValueError(f"Difficulty choice must be 1-{len(order)}, got {choice}")
        return order[choice - 1]

    @classmethod
    def parse(cls, value: Difficulty | str | int) -> Difficulty:
        """Accept a Difficulty, its name ('hard'), or a menu number."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls.from_menu(value)
        text = str(value).strip().lower()
        if text.isdigit():
            return cls.from_menu(int(text))
        return cls(text)

    @property
    def label(self) -> str:
        return self.value.capitalize()


POLICIES: dict[Difficulty, type[BotPolicy]] = {
    Difficulty.EASY: RandomPolicy,
    Difficulty.MEDIUM: HeuristicPolicy,
    Difficulty.HARD: MinimaxPolicy,
}


def create_policy(
    difficulty: Difficulty,
    rng: random.Random | None = None,
) -> BotPolicy:
    """Create the policy for a difficulty."""
    policy_cls = POLICIES[difficulty]
    return policy_cls(rng=rng)


def bot_move(
    board: Board,
    difficulty: Difficulty,
    bot_mark: Mark,
    human_mark: Mark,
    rng: random.Random | None = None,
    policy: BotPolicy | None = None,
) -> BotDecision | None:
    """
    Choose a move for the bot and place it on the board.

    Exactly one Empty cell is filled. On a full board nothing is
    placed and None is returned.
    """
    if policy is None:
        policy = create_policy(difficulty, rng=rng)

    decision = policy.select_move(board, bot_mark, human_mark)
    if decision is None:
        return None
    board.place_mark(decision.row, decision.col, bot_mark)

    logger.debug(
        "%s bot (%s) played %s: %s",
        difficulty.label, bot_mark.value, decision.cell, decision.explanation,
    )
    return decision
