"""
Pytest fixtures for Tictac tests.
"""

import random

import pytest

from ..engine_core.board import Board, Mark
from ..bots import RandomPolicy, HeuristicPolicy, MinimaxPolicy


@pytest.fixture
def empty_board() -> Board:
    """A fresh board."""
    return Board.empty()


@pytest.fixture
def center_opening() -> Board:
    """Human X has taken the center; O to move."""
    board = Board.empty()
    board.place_mark(1, 1, Mark.X)
    return board


@pytest.fixture
def win_or_block_board() -> Board:
    """O can win on (1, 2) and X threatens (0, 2)."""
    return Board.from_rows(["XX-", "OO-", "---"])


@pytest.fixture
def last_cell_board() -> Board:
    """Only (2, 2) is empty and neither mark can complete a line there."""
    return Board.from_rows(["XOX", "XOO", "OX-"])


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture(params=["easy", "medium", "hard"])
def any_policy(request, rng):
    """Each of the three bot policies."""
    return {
        "easy": RandomPolicy(rng=rng),
        "medium": HeuristicPolicy(rng=rng),
        "hard": MinimaxPolicy(rng=rng),
    }[request.param]
