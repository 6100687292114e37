"""
Board - The 3x3 grid of cell marks.

Design principles:
- Explicitly owned: one Board per game, no module-level grid
- Validated mutation: moves only ever target Empty cells
- Speculative probes: search code may place a mark temporarily,
  and the probe always restores the cell on exit
"""

from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


BOARD_SIZE = 3

# Characters accepted as an empty cell when parsing a board from text
EMPTY_CHARS = {"-", ".", " ", "_"}


class Mark(Enum):
    """Contents of a cell. X and O are the two player marks."""
    EMPTY = "-"
    X = "X"
    O = "O"

    def opponent(self) -> Mark:
        """Get the other player's mark."""
        if self == Mark.X:
            return Mark.O
        if self == Mark.O:
            return Mark.X
        raise ValueError("Empty mark has no opponent")

    @classmethod
    def parse(cls, symbol: str) -> Mark:
        """Parse a single board character (case-insensitive)."""
        if symbol in EMPTY_CHARS:
            return cls.EMPTY
        try:
            return cls(symbol.upper())
        except ValueError:
            raise ValueError(f"Unknown mark symbol: {symbol!r}") from None


class InvalidMove(ValueError):
    """Raised when a move targets a cell outside the grid or an occupied cell."""

    OUT_OF_BOUNDS = "out_of_bounds"
    OCCUPIED = "occupied"

    def __init__(self, row: int, col: int, error_code: str):
        self.row = row
        self.col = col
        self.error_code = error_code
        if error_code == self.OUT_OF_BOUNDS:
            message = f"Invalid position ({row}, {col}). Must be 0-{BOARD_SIZE - 1}."
        else:
            message = f"Cell ({row}, {col}) is already occupied"
        super().__init__(message)


def _empty_grid() -> list[list[Mark]]:
    return [[Mark.EMPTY for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]


@dataclass
class Board:
    """
    A 3x3 tic-tac-toe board.

    Invariants:
    - Every cell holds exactly one Mark
    - The number of non-empty cells equals the number of moves played
    - A move never overwrites a non-empty cell

    Usage:
        board = Board.empty()
        if board.is_valid_move(1, 1):
            board.place_mark(1, 1, Mark.X)
    """
    cells: list[list[Mark]] = field(default_factory=_empty_grid)

    @classmethod
    def empty(cls) -> Board:
        """Create a new, empty board."""
        return cls()

    @classmethod
    def from_rows(cls, rows: list[str] | str) -> Board:
        """
        Build a board from three 3-character rows.

        Accepts either a list of rows or a single string with rows
        separated by '/' or newlines, e.g. "XX-/OO-/---".
        """
        if isinstance(rows, str):
            rows = [r for r in rows.replace("\n", "/").split("/") if r != ""]

        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Expected {BOARD_SIZE} rows, got {len(rows)}")

        cells = []
        for text in rows:
            if len(text) != BOARD_SIZE:
                raise ValueError(f"Row {text!r} must have {BOARD_SIZE} cells")
            cells.append([Mark.parse(ch) for ch in text])
        return cls(cells=cells)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @staticmethod
    def in_bounds(row: int, col: int) -> bool:
        return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE

    def get(self, row: int, col: int) -> Mark:
        """Get the mark at a cell."""
        return self.cells[row][col]

    def is_valid_move(self, row: int, col: int) -> bool:
        """True iff the cell is on the grid and Empty. Never raises."""
        return self.in_bounds(row, col) and self.cells[row][col] == Mark.EMPTY

    def empty_cells(self) -> list[tuple[int, int]]:
        """All Empty cells in row-major order."""
        return [
            (row, col)
            for row in range(BOARD_SIZE)
            for col in range(BOARD_SIZE)
            if self.cells[row][col] == Mark.EMPTY
        ]

    @property
    def move_count(self) -> int:
        """Number of marks on the board."""
        return sum(
            1 for row in self.cells for mark in row if mark != Mark.EMPTY
        )

    def rows(self) -> tuple[tuple[Mark, ...], ...]:
        """Read-only snapshot of the grid."""
        return tuple(tuple(row) for row in self.cells)

    def to_text(self, separator: str = "/") -> str:
        """Compact text form, e.g. 'XX-/OO-/---'."""
        return separator.join(
            "".join(mark.value for mark in row) for row in self.cells
        )

    def copy(self) -> Board:
        """Create an independent copy of the board."""
        return Board(cells=[list(row) for row in self.cells])

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def _check_move(self, row: int, col: int, mark: Mark):
        if mark == Mark.EMPTY:
            raise ValueError("Cannot place an empty mark")
        if not self.in_bounds(row, col):
            raise InvalidMove(row, col, InvalidMove.OUT_OF_BOUNDS)
        if self.cells[row][col] != Mark.EMPTY:
            raise InvalidMove(row, col, InvalidMove.OCCUPIED)

    def place_mark(self, row: int, col: int, mark: Mark):
        """
        Place a mark on an Empty cell.

        Raises:
            InvalidMove: the cell is out of bounds or occupied.
                The board is left unchanged.
        """
        self._check_move(row, col, mark)
        self.cells[row][col] = mark

    @contextmanager
    def probe(self, row: int, col: int, mark: Mark) -> Iterator[Board]:
        """
        Temporarily place a mark for look-ahead.

        The cell is reset to Empty when the block exits, including
        early returns and exceptions raised inside the block.

        Usage:
            with board.probe(0, 2, Mark.O):
                won = check_winner(board) == Mark.O
        """
        self._check_move(row, col, mark)
        self.cells[row][col] = mark
        try:
            yield self
        finally:
            self.cells[row][col] = Mark.EMPTY

    def __str__(self) -> str:
        return self.to_text("\n")
