"""
Minimax Policy - Exhaustive game-tree search.

Every Empty cell is tried as the bot's move, and each continuation is
searched to the end of the game with both sides playing optimally.

Scoring of terminal positions (depth = plies placed after the
candidate move):
- bot wins:   10 - depth
- human wins: depth - 10
- draw:       0

No pruning or caching is used; the full 3x3 tree is small enough.
"""

from __future__ import annotations
import logging
import random

from ..engine_core.board import Board, Mark
from ..engine_core.evaluator import check_winner, is_full
from .policy import BotPolicy, BotDecision, RandomPolicy

logger = logging.getLogger(__name__)

WIN_SCORE = 10


class MinimaxPolicy(BotPolicy):
    """
    Hard difficulty: plays optimally and never loses.

    Ties between equally scored moves go to the first cell found in
    row-major order, so the choice is deterministic for a given board.
    """

    def __init__(self, seed: int | None = None, rng: random.Random | None = None):
        self.fallback = RandomPolicy(seed=seed, rng=rng)

        # Positions visited by the last search (for debugging)
        self.positions_evaluated = 0

    def select_move(
        self,
        board: Board,
        bot_mark: Mark,
        human_mark: Mark,
    ) -> BotDecision | None:
        self.positions_evaluated = 0

        best_score: int | None = None
        best_cell: tuple[int, int] | None = None
        scores: dict[str, int] = {}

        for row, col in board.empty_cells():
            with board.probe(row, col, bot_mark):
                score = self.minimax(board, bot_mark, human_mark, 0, False)
            scores[f"{row},{col}"] = score
            if best_score is None or score > best_score:
                best_score = score
                best_cell = (row, col)

        if best_cell is None:
            logger.warning("Minimax found no candidate move; falling back to random")
            return self.fallback.select_move(board, bot_mark, human_mark)

        logger.debug(
            "Minimax evaluated %d positions. Best move: %s (score: %s)",
            self.positions_evaluated, best_cell, best_score,
        )

        return BotDecision(
            row=best_cell[0],
            col=best_cell[1],
            explanation=_explain(best_score),
            evaluated_moves=self.positions_evaluated,
            best_score=best_score,
            evaluation_details={"scores": scores},
        )

    def minimax(
        self,
        board: Board,
        bot_mark: Mark,
        human_mark: Mark,
        depth: int,
        is_maximizing: bool,
    ) -> int:
        """
        Score the board with `bot_mark` maximizing and `human_mark`
        minimizing.

        Args:
            board: Position to score (restored before returning)
            bot_mark: The maximizing player's mark
            human_mark: The minimizing player's mark
            depth: Plies placed since the candidate move
            is_maximizing: True if the bot is to move

        Returns:
            The score of the position.
        """
        self.positions_evaluated += 1

        winner = check_winner(board)
        if winner == bot_mark:
            return WIN_SCORE - depth
        if winner == human_mark:
            return depth - WIN_SCORE
        if is_full(board):
            return 0

        player = bot_mark if is_maximizing else human_mark
        best = None
        for row, col in board.empty_cells():
            with board.probe(row, col, player):
                score = self.minimax(
                    board, bot_mark, human_mark, depth + 1, not is_maximizing
                )
            if best is None:
                best = score
            elif is_maximizing:
                best = max(best, score)
            else:
                best = min(best, score)
        return best


def _explain(score: int) -> str:
    if score > 0:
        return f"Forced win (score {score})"
    if score < 0:
        return f"Delays a forced loss (score {score})"
    return "Best play leads to a draw"
