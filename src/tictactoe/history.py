"""
Move history for the game in progress.

Each entry: Move(number, mark, position, time). Kept in memory only and
cleared when a new game starts.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterator, List, Optional

from .game import EMPTY, Board


@dataclass(frozen=True)
class Move:
    number: int
    mark: int
    position: int
    time: datetime


class MoveHistory:
    """Ordered record of the moves played in one game."""

    def __init__(self):
        self.moves: List[Move] = []

    def __len__(self) -> int:
        return len(self.moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(self.moves)

    def add(self, mark: int, position: int) -> Move:
        """Append a move and return the stored record."""
        move = Move(
            number=len(self.moves),
            mark=mark,
            position=int(position),
            time=datetime.now(),
        )
        self.moves.append(move)
        return move

    def last(self) -> Optional[Move]:
        return self.moves[-1] if self.moves else None

    def clear(self):
        self.moves.clear()

    def positions(self) -> List[int]:
        return [m.position for m in self.moves]

    def board_at(self, move_number: int) -> List[int]:
        """
        Rebuild the cells as they stood right after move_number.

        Args:
            move_number: 0-based move index, or -1 for the empty board

        Returns:
            list[int] of length 9
        """
        if move_number < -1 or move_number >= len(self.moves):
            raise IndexError(f"move {move_number} out of range (have {len(self.moves)})")
        cells = [EMPTY] * Board.SIZE
        for move in self.moves[:move_number + 1]:
            cells[move.position] = move.mark
        return cells
