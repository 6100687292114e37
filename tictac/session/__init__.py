"""
Session Module - Rounds, turns, and the running score.

A round is one game on a fresh board:
- Created when the player starts a game
- Alternates human and bot turns
- Ends on a win or a draw

A session holds the win/loss/draw tally across rounds.
Sessions are EPHEMERAL: nothing outlives the process.
"""

from .game_loop import GameLoop, LoopState, TurnResult
from .manager import Session, SessionState, SessionTally, RoundResult, result_for

__all__ = [
    "GameLoop",
    "LoopState",
    "TurnResult",
    "Session",
    "SessionState",
    "SessionTally",
    "RoundResult",
    "result_for",
]
