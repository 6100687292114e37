"""
Game Loop - The turn controller for one round.

The loop:
1. Human or bot is to move (X always moves first)
2. The move is applied to the board
3. The board is classified
4. In progress -> the other side is to move
   Won or drawn -> the round is over

No move skips the terminal check.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable
import logging
import random

from ..engine_core.board import Board, Mark
from ..engine_core.evaluator import GameOutcome, OutcomeKind, classify
from ..engine_core.move import Move, MoveResult, apply_move
from ..bots.difficulty import Difficulty, create_policy
from ..bots.policy import BotPolicy, BotDecision

logger = logging.getLogger(__name__)

# Error codes for rejected turns
INVALID_MOVE = "invalid_move"
NOT_YOUR_TURN = "not_your_turn"
GAME_OVER = "game_over"


class LoopState(Enum):
    """State of the turn controller."""
    AWAITING_HUMAN_MOVE = "awaiting_human_move"
    AWAITING_BOT_MOVE = "awaiting_bot_move"
    WON = "won"
    DRAW = "draw"


@dataclass
class TurnResult:
    """
    Result of processing a turn.

    On success, carries the move that was played and the outcome
    after it. On failure, the board and loop state are unchanged.
    """
    success: bool
    loop_state: LoopState

    move: Move | None = None
    outcome: GameOutcome | None = None

    # Set when the bot made the move
    by_bot: bool = False
    explanation: str = ""

    # Errors
    error: str | None = None
    error_code: str | None = None

    @property
    def winner(self) -> Mark | None:
        return self.outcome.winner if self.outcome else None


MoveSource = Callable[[Board, TurnResult | None], tuple[int, int]]


class GameLoop:
    """
    Drives one round between a human and a bot.

    Usage:
        loop = GameLoop(Difficulty.HARD, human_first=True)

        result = loop.submit_human_move(1, 1)
        if not result.success:
            # Show result.error, ask again
            ...

        result = loop.play_bot_turn()
        if loop.is_over:
            print(loop.outcome)
    """

    def __init__(
        self,
        difficulty: Difficulty,
        human_first: bool = True,
        policy: BotPolicy | None = None,
        rng: random.Random | None = None,
    ):
        self.difficulty = difficulty
        self.human_mark = Mark.X if human_first else Mark.O
        self.bot_mark = self.human_mark.opponent()
        self.policy = policy or create_policy(difficulty, rng=rng)

        self._board = Board.empty()
        self._outcome = GameOutcome.in_progress()
        self.history: list[Move] = []

        self.state = (
            LoopState.AWAITING_HUMAN_MOVE if human_first
            else LoopState.AWAITING_BOT_MOVE
        )

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    @property
    def board(self) -> Board:
        """The round's board. Callers must not mutate it."""
        return self._board

    @property
    def outcome(self) -> GameOutcome:
        return self._outcome

    @property
    def is_over(self) -> bool:
        return self.state in {LoopState.WON, LoopState.DRAW}

    # ------------------------------------------------------------------
    # Turns
    # ------------------------------------------------------------------

    def submit_human_move(self, row: int, col: int) -> TurnResult:
        """
        Apply the human's move.

        Invalid moves are rejected with no state change; the caller
        asks the human again.
        """
        rejected = self._check_turn(LoopState.AWAITING_HUMAN_MOVE)
        if rejected:
            return rejected

        result = apply_move(self._board, Move(row, col, self.human_mark))
        if not result.success:
            return TurnResult(
                success=False,
                loop_state=self.state,
                move=result.move,
                outcome=self._outcome,
                error=result.error,
                error_code=INVALID_MOVE,
            )
        return self._advance(result)

    def play_bot_turn(self) -> TurnResult:
        """Let the bot choose and apply its move."""
        rejected = self._check_turn(LoopState.AWAITING_BOT_MOVE)
        if rejected:
            return rejected

        decision: BotDecision | None = self.policy.select_move(
            self._board, self.bot_mark, self.human_mark
        )
        if decision is None:
            # Unreachable while the round is in progress
            raise RuntimeError("Bot found no move on an unfinished board")
        result = apply_move(
            self._board, Move(decision.row, decision.col, self.bot_mark)
        )
        if not result.success:
            # Policies only return Empty cells; this is a policy bug
            raise RuntimeError(f"Bot chose an illegal move: {result.error}")

        turn = self._advance(result)
        turn.by_bot = True
        turn.explanation = decision.explanation
        return turn

    def step(self, move_source: MoveSource, last: TurnResult | None = None) -> TurnResult:
        """Play whichever side is to move."""
        if self.state == LoopState.AWAITING_HUMAN_MOVE:
            row, col = move_source(self._board, last)
            return self.submit_human_move(row, col)
        return self.play_bot_turn()

    def run(
        self,
        move_source: MoveSource,
        on_turn: Callable[[TurnResult], None] | None = None,
    ) -> GameOutcome:
        """
        Play the round to the end.

        Args:
            move_source: Called with the board and the last rejected
                turn (or None); returns the human's (row, col).
            on_turn: Called after every accepted or rejected turn.

        Returns:
            The terminal outcome.
        """
        last: TurnResult | None = None
        while not self.is_over:
            result = self.step(move_source, last)
            last = None if result.success else result
            if on_turn:
                on_turn(result)
        return self._outcome

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _check_turn(self, expected: LoopState) -> TurnResult | None:
        if self.is_over:
            return TurnResult(
                success=False,
                loop_state=self.state,
                outcome=self._outcome,
                error="Game is already over!",
                error_code=GAME_OVER,
            )
        if self.state != expected:
            return TurnResult(
                success=False,
                loop_state=self.state,
                outcome=self._outcome,
                error="It's not your turn",
                error_code=NOT_YOUR_TURN,
            )
        return None

    def _advance(self, result: MoveResult) -> TurnResult:
        outcome = result.outcome or classify(self._board)
        self._outcome = outcome
        self.history.append(result.move)

        if outcome.kind == OutcomeKind.WIN:
            self.state = LoopState.WON
        elif outcome.kind == OutcomeKind.DRAW:
            self.state = LoopState.DRAW
        elif self.state == LoopState.AWAITING_HUMAN_MOVE:
            self.state = LoopState.AWAITING_BOT_MOVE
        else:
            self.state = LoopState.AWAITING_HUMAN_MOVE

        if self.is_over:
            logger.info("Round over after %d moves: %s", len(self.history), outcome)

        return TurnResult(
            success=True,
            loop_state=self.state,
            move=result.move,
            outcome=outcome,
        )
