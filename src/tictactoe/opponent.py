"""
Rule-based opponent for TicTacToe.

Three fixed tiers, each short-circuiting the next:
  1. complete one of our own lines if possible
  2. otherwise block the human's immediate win
  3. otherwise play a uniformly random empty cell

No look-ahead beyond one ply, so forks are neither created nor defended.
"""

from typing import Optional, Sequence

import numpy as np

from .game import O, WIN_LINES, X, legal_moves, other

# position -> winning lines through it
_LINES_THROUGH = {
    pos: [line for line in WIN_LINES if pos in line]
    for pos in range(9)
}


def completes_line(cells: Sequence[int], position: int, mark: int) -> bool:
    """True if placing mark at the (empty) position would complete a line."""
    for line in _LINES_THROUGH[position]:
        if all(cells[p] == mark for p in line if p != position):
            return True
    return False


def find_winning_move(board: Sequence[int], mark: int) -> Optional[int]:
    """
    Find the lowest-index empty cell that wins immediately for mark.

    The board is only read, never written to.

    Returns:
        Position 0-8, or None if no single move wins.
    """
    cells = list(board)
    for pos in legal_moves(cells):
        if completes_line(cells, pos, mark):
            return pos
    return None


def random_move(board: Sequence[int], rng: Optional[np.random.Generator] = None) -> int:
    """Uniformly random empty cell."""
    moves = legal_moves(list(board))
    if not moves:
        raise ValueError("no empty cell left to play")
    if rng is None:
        rng = np.random.default_rng()
    return int(rng.choice(moves))


def choose_opponent_move(
    board: Sequence[int],
    opponent_mark: int,
    human_mark: int,
    rng: Optional[np.random.Generator] = None,
) -> int:
    """
    Pick the engine's move: win, else block, else random.

    Args:
        board: Current board (Board or 9-cell sequence)
        opponent_mark: Mark played by the engine
        human_mark: Mark played by the other side
        rng: Random source for the fallback tier (fresh unseeded one if None)

    Returns:
        Position 0-8 of an empty cell
    """
    move = find_winning_move(board, opponent_mark)
    if move is None:
        move = find_winning_move(board, human_mark)
    if move is None:
        move = random_move(board, rng)
    return move


class HeuristicOpponent:
    """Engine bound to one mark, owning its random source."""

    def __init__(self, mark: int, rng: Optional[np.random.Generator] = None):
        if mark not in (X, O):
            raise ValueError(f"opponent needs a player mark, got {mark!r}")
        self.mark = mark
        self.rng = rng if rng is not None else np.random.default_rng()

    def move(self, board: Sequence[int]) -> int:
        return choose_opponent_move(board, self.mark, other(self.mark), self.rng)

    def __call__(self, board: Sequence[int]) -> int:
        return self.move(board)
