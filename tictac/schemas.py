"""
Pydantic Schemas - Read-only views for presentation and round setup.

These models are the contract between the engine and whatever displays
it (the console today). They are built from engine objects and never
feed back into the engine's state.
"""

from enum import Enum
from typing import Optional, Union
from pydantic import BaseModel, Field, field_validator

from .engine_core.board import Board, Mark
from .engine_core.evaluator import GameOutcome, OutcomeKind, winning_line
from .bots.difficulty import Difficulty
from .session.manager import SessionTally, result_for


# =============================================================================
# Enums
# =============================================================================

class OutcomeStatus(str, Enum):
    """Board classification."""
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


# =============================================================================
# Round setup
# =============================================================================

class RoundConfig(BaseModel):
    """Choices made before each round."""
    difficulty: Difficulty = Difficulty.MEDIUM
    human_first: bool = True

    @field_validator("difficulty", mode="before")
    @classmethod
    def _parse_difficulty(cls, value: Union[Difficulty, str, int]) -> Difficulty:
        return Difficulty.parse(value)

    @property
    def human_mark(self) -> Mark:
        return Mark.X if self.human_first else Mark.O


# =============================================================================
# Presentation models
# =============================================================================

class BoardSnapshot(BaseModel):
    """Board contents for display."""
    rows: list[str] = Field(description="Three rows of '-', 'X', 'O'")
    empty_cells: list[tuple[int, int]] = Field(default_factory=list)
    moves_played: int = 0

    @classmethod
    def from_board(cls, board: Board) -> "BoardSnapshot":
        return cls(
            rows=["".join(mark.value for mark in row) for row in board.rows()],
            empty_cells=board.empty_cells(),
            moves_played=board.move_count,
        )


class OutcomeInfo(BaseModel):
    """Result of a board for display."""
    status: OutcomeStatus
    winner: Optional[str] = None
    winning_line: Optional[list[tuple[int, int]]] = None

    @classmethod
    def from_outcome(cls, outcome: GameOutcome, board: Optional[Board] = None) -> "OutcomeInfo":
        line = None
        if board is not None and outcome.kind == OutcomeKind.WIN:
            found = winning_line(board)
            line = list(found) if found else None
        return cls(
            status=OutcomeStatus(outcome.kind.value),
            winner=outcome.winner.value if outcome.winner else None,
            winning_line=line,
        )

    def result_for(self, human_mark: Mark) -> Optional[str]:
        """'win', 'loss' or 'draw' for the human; None while in progress."""
        if self.status == OutcomeStatus.IN_PROGRESS:
            return None
        if self.status == OutcomeStatus.DRAW:
            outcome = GameOutcome.draw()
        else:
            outcome = GameOutcome.win(Mark(self.winner))
        return result_for(outcome, human_mark).value


class TallyInfo(BaseModel):
    """Session score for display."""
    wins: int = Field(default=0, ge=0)
    losses: int = Field(default=0, ge=0)
    draws: int = Field(default=0, ge=0)
    games_played: int = Field(default=0, ge=0)

    @classmethod
    def from_tally(cls, tally: SessionTally) -> "TallyInfo":
        return cls(
            wins=tally.wins,
            losses=tally.losses,
            draws=tally.draws,
            games_played=tally.games_played,
        )
