"""
Tests for bot move selection.

Tests:
- Every policy picks an Empty cell and leaves the board untouched
- Heuristic tiers: win before block before random
- Minimax plays optimally and deterministically
- Difficulty dispatch places exactly one mark
"""

import logging
import random

import pytest

from ..engine_core.board import Board, Mark
from ..engine_core.evaluator import classify, OutcomeKind
from ..bots import (
    BotPolicy,
    RandomPolicy,
    HeuristicPolicy,
    MinimaxPolicy,
    Difficulty,
    POLICIES,
    create_policy,
    bot_move,
    find_winning_move,
)

CORNERS = {(0, 0), (0, 2), (2, 0), (2, 2)}

SAMPLE_BOARDS = [
    "---/-X-/---",
    "XX-/OO-/---",
    "X--/-O-/--X",
    "XOX/-O-/---",
    "XOX/XOO/OX-",
]


class TestPolicyContract:
    """Properties shared by all policies."""

    @pytest.mark.parametrize("rows", SAMPLE_BOARDS)
    def test_selects_empty_cell_without_mutation(self, any_policy, rows):
        board = Board.from_rows(rows)
        before = board.to_text()

        decision = any_policy.select_move(board, Mark.O, Mark.X)

        assert board.is_valid_move(decision.row, decision.col)
        assert board.to_text() == before

    @pytest.mark.parametrize("rows", SAMPLE_BOARDS)
    def test_bot_move_fills_exactly_one_cell(self, any_policy, rows):
        board = Board.from_rows(rows)
        before = board.rows()
        empties = len(board.empty_cells())

        decision = bot_move(board, Difficulty.EASY, Mark.O, Mark.X, policy=any_policy)

        assert len(board.empty_cells()) == empties - 1
        assert board.get(decision.row, decision.col) == Mark.O
        for row in range(3):
            for col in range(3):
                if before[row][col] != Mark.EMPTY:
                    assert board.get(row, col) == before[row][col]

    def test_full_board_degrades_without_failing(self, any_policy, caplog):
        board = Board.from_rows(["XOX", "XOO", "OXX"])

        with caplog.at_level(logging.WARNING):
            decision = any_policy.select_move(board, Mark.O, Mark.X)

        assert decision is None
        assert board.to_text() == "XOX/XOO/OXX"
        assert any(r.levelno == logging.WARNING for r in caplog.records)

    def test_policy_name(self):
        assert MinimaxPolicy().get_name() == "MinimaxPolicy"


class TestRandomPolicy:
    """Tests for the easy policy."""

    def test_seeded_choices_repeat(self, center_opening):
        first = RandomPolicy(seed=7).select_move(center_opening, Mark.O, Mark.X)
        second = RandomPolicy(seed=7).select_move(center_opening, Mark.O, Mark.X)
        assert first.cell == second.cell

    def test_choices_cover_all_empty_cells(self, center_opening):
        policy = RandomPolicy(seed=42)
        seen = {
            policy.select_move(center_opening, Mark.O, Mark.X).cell
            for _ in range(200)
        }
        assert seen == set(center_opening.empty_cells())

    def test_single_empty_cell(self, last_cell_board):
        decision = RandomPolicy(seed=1).select_move(last_cell_board, Mark.O, Mark.X)
        assert decision.cell == (2, 2)


class TestHeuristicPolicy:
    """Tests for the medium policy."""

    def test_find_winning_move(self, win_or_block_board):
        assert find_winning_move(win_or_block_board, Mark.O) == (1, 2)
        assert find_winning_move(win_or_block_board, Mark.X) == (0, 2)
        assert win_or_block_board.to_text() == "XX-/OO-/---"

    def test_no_winning_move(self, center_opening):
        assert find_winning_move(center_opening, Mark.X) is None

    def test_win_before_block(self, win_or_block_board):
        decision = HeuristicPolicy(seed=0).select_move(win_or_block_board, Mark.O, Mark.X)

        assert decision.cell == (1, 2)
        assert decision.evaluation_details["tier"] == "win"

    def test_blocks_opponent(self):
        board = Board.from_rows(["XX-", "O--", "---"])
        decision = HeuristicPolicy(seed=0).select_move(board, Mark.O, Mark.X)

        assert decision.cell == (0, 2)
        assert decision.evaluation_details["tier"] == "block"

    def test_random_when_nothing_tactical(self, center_opening):
        decision = HeuristicPolicy(seed=3).select_move(center_opening, Mark.O, Mark.X)

        assert decision.cell in center_opening.empty_cells()
        assert decision.evaluation_details["tier"] == "random"


class TestMinimaxPolicy:
    """Tests for the hard policy."""

    def test_answers_center_with_corner(self, center_opening):
        decision = MinimaxPolicy().select_move(center_opening, Mark.O, Mark.X)

        assert decision.cell in CORNERS
        assert decision.best_score == 0

    def test_takes_win_over_block(self, win_or_block_board):
        decision = MinimaxPolicy().select_move(win_or_block_board, Mark.O, Mark.X)

        assert decision.cell == (1, 2)
        assert decision.best_score == 10

    def test_blocks_when_it_cannot_win(self):
        board = Board.from_rows(["XX-", "-O-", "---"])
        decision = MinimaxPolicy().select_move(board, Mark.O, Mark.X)
        assert decision.cell == (0, 2)

    def test_prefers_faster_win(self):
        # O wins now on (2, 2); other moves win later at best
        board = Board.from_rows(["OX-", "XO-", "X--"])
        decision = MinimaxPolicy().select_move(board, Mark.O, Mark.X)

        assert decision.cell == (2, 2)
        assert decision.best_score == 10

    def test_repeatable_and_side_effect_free(self):
        board = Board.from_rows(["X--", "-O-", "--X"])
        before = board.to_text()
        policy = MinimaxPolicy()

        first = policy.select_move(board, Mark.O, Mark.X)
        assert board.to_text() == before
        second = policy.select_move(board, Mark.O, Mark.X)
        assert board.to_text() == before

        assert first.cell == second.cell
        assert first.best_score == second.best_score

    def test_avoids_corner_trap(self):
        # After X corners and O center, X takes the opposite corner:
        # O must answer on an edge, not a corner
        board = Board.from_rows(["X--", "-O-", "--X"])
        decision = MinimaxPolicy().select_move(board, Mark.O, Mark.X)

        assert decision.cell in {(0, 1), (1, 0), (1, 2), (2, 1)}
        assert decision.best_score == 0

    def test_counts_positions(self, win_or_block_board):
        policy = MinimaxPolicy()
        decision = policy.select_move(win_or_block_board, Mark.O, Mark.X)

        assert policy.positions_evaluated > 0
        assert decision.evaluated_moves == policy.positions_evaluated

    def test_terminal_scores(self):
        policy = MinimaxPolicy()
        bot_won = Board.from_rows(["OOO", "XX-", "X--"])
        human_won = Board.from_rows(["XXX", "OO-", "O--"])
        drawn = Board.from_rows(["XOX", "XOO", "OXX"])

        assert policy.minimax(bot_won, Mark.O, Mark.X, 2, True) == 8
        assert policy.minimax(human_won, Mark.O, Mark.X, 3, True) == -7
        assert policy.minimax(drawn, Mark.O, Mark.X, 4, False) == 0

    @pytest.mark.parametrize("seed", [1, 2, 3])
    def test_never_loses_to_random_opponent(self, seed):
        rng = random.Random(seed)
        opponent = RandomPolicy(rng=rng)
        hard = MinimaxPolicy()
        board = Board.empty()

        mark = Mark.X
        while not classify(board).is_terminal:
            policy = opponent if mark == Mark.X else hard
            decision = policy.select_move(board, mark, mark.opponent())
            board.place_mark(decision.row, decision.col, mark)
            mark = mark.opponent()

        outcome = classify(board)
        assert outcome.winner != Mark.X

    def test_self_play_from_center_is_a_draw(self, center_opening):
        hard = MinimaxPolicy()
        board = center_opening
        mark = Mark.O

        while not classify(board).is_terminal:
            decision = hard.select_move(board, mark, mark.opponent())
            board.place_mark(decision.row, decision.col, mark)
            mark = mark.opponent()

        assert classify(board).kind == OutcomeKind.DRAW


class TestDifficulty:
    """Tests for difficulty selection."""

    def test_menu_order(self):
        assert Difficulty.from_menu(1) == Difficulty.EASY
        assert Difficulty.from_menu(2) == Difficulty.MEDIUM
        assert Difficulty.from_menu(3) == Difficulty.HARD

    @pytest.mark.parametrize("choice", [0, 4, -1])
    def test_menu_out_of_range(self, choice):
        with pytest.raises(ValueError):
            Difficulty.from_menu(choice)

    @pytest.mark.parametrize("value,expected", [
        ("hard", Difficulty.HARD),
        ("Easy", Difficulty.EASY),
        ("2", Difficulty.MEDIUM),
        (3, Difficulty.HARD),
        (Difficulty.MEDIUM, Difficulty.MEDIUM),
    ])
    def test_parse(self, value, expected):
        assert Difficulty.parse(value) == expected

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            Difficulty.parse("impossible")

    def test_each_difficulty_has_its_own_policy(self):
        assert POLICIES[Difficulty.EASY] is RandomPolicy
        assert POLICIES[Difficulty.MEDIUM] is HeuristicPolicy
        assert POLICIES[Difficulty.HARD] is MinimaxPolicy

        for difficulty in Difficulty:
            policy = create_policy(difficulty, rng=random.Random(0))
            assert isinstance(policy, BotPolicy)
            assert isinstance(policy, POLICIES[difficulty])

    @pytest.mark.parametrize("difficulty", [Difficulty.MEDIUM, Difficulty.HARD])
    def test_bot_move_wins_when_it_can(self, win_or_block_board, difficulty):
        decision = bot_move(win_or_block_board, difficulty, Mark.O, Mark.X)

        assert decision.cell == (1, 2)
        assert classify(win_or_block_board).winner == Mark.O

    @pytest.mark.parametrize("difficulty", list(Difficulty))
    def test_bot_move_on_full_board(self, difficulty):
        board = Board.from_rows(["XOX", "XOO", "OXX"])

        assert bot_move(board, difficulty, Mark.O, Mark.X) is None
        assert board.to_text() == "XOX/XOO/OXX"
