"""
TicTacToe board state and game rules.

Board representation: list[int] of length 9, row-major
  - 0: empty
  - +1: X (moves first)
  - -1: O

Turn: +1 (X) or -1 (O) - side to move
"""

import numbers
from typing import Callable, List, Optional, Sequence, Tuple

EMPTY = 0
X = +1
O = -1

GLYPHS = {EMPTY: ".", X: "X", O: "O"}

# Winning lines (rows, columns, diagonals)
WIN_LINES = [
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),              # diagonals
]


def other(mark: int) -> int:
    """Return the opposing mark."""
    if mark not in (X, O):
        raise ValueError(f"not a player mark: {mark!r}")
    return -mark


def check_win(cells: Sequence[int], mark: int) -> bool:
    """True if any winning line is entirely occupied by mark."""
    return winning_line(cells, mark) is not None


def winning_line(cells: Sequence[int], mark: int) -> Optional[Tuple[int, int, int]]:
    """Return the first line completed by mark, or None."""
    if mark == EMPTY:
        return None
    for a, b, c in WIN_LINES:
        if cells[a] == mark and cells[b] == mark and cells[c] == mark:
            return (a, b, c)
    return None


def is_board_full(cells: Sequence[int]) -> bool:
    return all(v != EMPTY for v in cells)


def legal_moves(cells: Sequence[int]) -> List[int]:
    """Return list of legal move indices (empty squares)."""
    return [i for i, v in enumerate(cells) if v == EMPTY]


class Board:
    """
    Mutable 3x3 board plus side to move.

    place_mark() is the only way cells change outside reset(). It never
    advances the turn; that is left to the caller once the move is known
    to neither win nor fill the board.
    """

    SIZE = 9

    def __init__(self):
        self.on_reset: List[Callable[[], None]] = []
        self.reset()

    @classmethod
    def from_cells(cls, cells: Sequence[int], turn: int = X) -> "Board":
        """Build a board from an explicit position (mostly for analysis and tests)."""
        if len(cells) != cls.SIZE:
            raise ValueError(f"expected {cls.SIZE} cells, got {len(cells)}")
        if any(v not in GLYPHS for v in cells):
            raise ValueError(f"invalid cell values: {list(cells)}")
        board = cls()
        board.cells = list(cells)
        if turn not in (X, O):
            raise ValueError(f"invalid turn: {turn!r}")
        board.turn = turn
        return board

    def __getitem__(self, position: int) -> int:
        return self.cells[position]

    def __len__(self) -> int:
        return self.SIZE

    def __iter__(self):
        return iter(self.cells)

    def __str__(self) -> str:
        return self.render()

    def reset(self):
        """Clear every cell, give the move to X and signal a new game."""
        self.cells: List[int] = [EMPTY] * self.SIZE
        self.turn = X
        for callback in self.on_reset:
            callback()

    def place_mark(self, position: int) -> bool:
        """
        Place the current turn's mark at position.

        Returns:
            True if the mark was placed, False if position is out of range
            or already occupied (the board is left untouched).
        """
        if not isinstance(position, numbers.Integral) or isinstance(position, bool):
            return False
        if position < 0 or position >= self.SIZE or self.cells[position] != EMPTY:
            return False
        self.cells[position] = self.turn
        return True

    def advance_turn(self):
        self.turn = other(self.turn)

    def render(self) -> str:
        rows = []
        for r in range(3):
            rows.append(" ".join(GLYPHS[self.cells[r * 3 + c]] for c in range(3)))
        return "\n".join(rows)

    def check_win(self, mark: int) -> bool:
        return check_win(self.cells, mark)

    def is_board_full(self) -> bool:
        return is_board_full(self.cells)

    def empty_cells(self) -> List[int]:
        return legal_moves(self.cells)

    def snapshot(self) -> Tuple[int, ...]:
        return tuple(self.cells)

    def copy(self) -> "Board":
        return Board.from_cells(self.cells, self.turn)
