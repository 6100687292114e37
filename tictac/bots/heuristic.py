"""
Heuristic Policy - Win, else block, else random.

The tiers are checked in a fixed order:
1. A cell that completes a line for the bot
2. A cell that completes a line for the opponent (block it)
3. Any Empty cell, chosen at random

Winning is always checked before blocking. When both are available
the bot takes the win.
"""

from __future__ import annotations
import logging
import random

from ..engine_core.board import Board, Mark
from ..engine_core.evaluator import check_winner
from .policy import BotPolicy, BotDecision, RandomPolicy

logger = logging.getLogger(__name__)


def find_winning_move(board: Board, mark: Mark) -> tuple[int, int] | None:
    """
    Find a cell that immediately completes a line for `mark`.

    Scans Empty cells in row-major order, probing each one.
    The board is unchanged when this returns.
    """
    for row, col in board.empty_cells():
        with board.probe(row, col, mark):
            if check_winner(board) == mark:
                return (row, col)
    return None


class HeuristicPolicy(BotPolicy):
    """
    Medium difficulty: one-ply tactical check with random fallback.
    """

    def __init__(self, seed: int | None = None, rng: random.Random | None = None):
        self.fallback = RandomPolicy(seed=seed, rng=rng)

    def select_move(
        self,
        board: Board,
        bot_mark: Mark,
        human_mark: Mark,
    ) -> BotDecision | None:
        empties = len(board.empty_cells())

        win = find_winning_move(board, bot_mark)
        if win is not None:
            return BotDecision(
                row=win[0],
                col=win[1],
                explanation="Completes a line",
                evaluated_moves=empties,
                evaluation_details={"tier": "win"},
            )

        block = find_winning_move(board, human_mark)
        if block is not None:
            return BotDecision(
                row=block[0],
                col=block[1],
                explanation="Blocks the opponent's line",
                evaluated_moves=empties * 2,
                evaluation_details={"tier": "block"},
            )

        if empties == 0:
            logger.warning("Heuristic policy called on a full board; falling back to random")

        decision = self.fallback.select_move(board, bot_mark, human_mark)
        if decision is not None:
            decision.evaluation_details["tier"] = "random"
        return decision
