"""
Session - Repeated rounds against the bot and the running tally.

LIFECYCLE:
1. Session created when the console game starts (in-memory only)
2. Each round:
   - Difficulty and first player chosen
   - A new GameLoop (and Board) is created
   - The round is played to a terminal state
   - The outcome is recorded in the tally
3. Session ends when the player quits; nothing is persisted

The engine only reports outcomes. Only the session updates the tally.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import logging
import random
import time
import uuid

from ..engine_core.board import Mark
from ..engine_core.evaluator import GameOutcome, OutcomeKind
from ..bots.difficulty import Difficulty
from .game_loop import GameLoop

logger = logging.getLogger(__name__)


class RoundResult(Enum):
    """A finished round, from the human's point of view."""
    WIN = "win"
    LOSS = "loss"
    DRAW = "draw"


def result_for(outcome: GameOutcome, human_mark: Mark) -> RoundResult:
    """Translate a terminal outcome into win/loss/draw for the human."""
    if outcome.kind == OutcomeKind.DRAW:
        return RoundResult.DRAW
    if outcome.kind == OutcomeKind.WIN:
        return RoundResult.WIN if outcome.winner == human_mark else RoundResult.LOSS
    raise ValueError("Round is still in progress")


@dataclass
class SessionTally:
    """Win/loss/draw counters for the human player."""
    wins: int = 0
    losses: int = 0
    draws: int = 0

    @property
    def games_played(self) -> int:
        return self.wins + self.losses + self.draws

    def record(self, outcome: GameOutcome, human_mark: Mark) -> RoundResult:
        """Count a finished round."""
        result = result_for(outcome, human_mark)
        if result == RoundResult.WIN:
            self.wins += 1
        elif result == RoundResult.LOSS:
            self.losses += 1
        else:
            self.draws += 1
        return result

    def reset(self):
        self.wins = 0
        self.losses = 0
        self.draws = 0


class SessionState(Enum):
    """State of a session."""
    IDLE = "idle"  # Between rounds
    PLAYING = "playing"  # Round in progress
    ENDED = "ended"  # Player quit


@dataclass
class Session:
    """
    An in-memory play session.

    Contains:
    - The running tally
    - The random source shared by every round's bot
    - The round currently being played, if any
    """
    session_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: float = field(default_factory=time.time)
    seed: int | None = None

    state: SessionState = SessionState.IDLE
    tally: SessionTally = field(default_factory=SessionTally)
    current_round: GameLoop | None = None
    rounds_played: int = 0

    rng: random.Random = field(init=False, repr=False)

    def __post_init__(self):
        self.rng = random.Random(self.seed)

    def is_active(self) -> bool:
        return self.state != SessionState.ENDED

    def start_round(self, difficulty: Difficulty, human_first: bool = True) -> GameLoop:
        """Create a new round with a fresh board."""
        if not self.is_active():
            raise ValueError("Session has ended")

        loop = GameLoop(difficulty, human_first=human_first, rng=self.rng)
        self.current_round = loop
        self.state = SessionState.PLAYING
        logger.info(
            "Session %s: round %d started (%s, human plays %s)",
            self.session_id, self.rounds_played + 1,
            difficulty.value, loop.human_mark.value,
        )
        return loop

    def finish_round(self, loop: GameLoop | None = None) -> RoundResult:
        """Record a finished round in the tally."""
        loop = loop or self.current_round
        if loop is None:
            raise ValueError("No round to finish")
        if not loop.is_over:
            raise ValueError("Round is still in progress")

        result = self.tally.record(loop.outcome, loop.human_mark)
        self.rounds_played += 1
        self.current_round = None
        self.state = SessionState.IDLE
        return result

    def end(self):
        """End the session. The tally is discarded with it."""
        self.current_round = None
        self.state = SessionState.ENDED
