"""
Bots module - Bot opponent implementations.

Provides:
- BotPolicy: Interface for bot decision-making
- RandomPolicy: Easy, uniform random choice
- HeuristicPolicy: Medium, win/block/random
- MinimaxPolicy: Hard, exhaustive search
- Difficulty: Selects the policy for a game
"""

from .policy import BotPolicy, BotDecision, RandomPolicy
from .heuristic import HeuristicPolicy, find_winning_move
from .minimax import MinimaxPolicy
from .difficulty import Difficulty, POLICIES, create_policy, bot_move

__all__ = [
    "BotPolicy",
    "BotDecision",
    "RandomPolicy",
    "HeuristicPolicy",
    "find_winning_move",
    "MinimaxPolicy",
    "Difficulty",
    "POLICIES",
    "create_policy",
    "bot_move",
]
