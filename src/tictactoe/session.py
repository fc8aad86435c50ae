"""
Game progression: one board, one opponent role, many games.

States per game:
  AWAITING(turn) -> WON(turn)    legal move completes a line
                 -> TIED         legal move fills the board
                 -> AWAITING(other(turn))
WON and TIED are terminal until new_game().
"""

from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np

from .game import EMPTY, O, X, Board, other
from .history import MoveHistory
from .opponent import choose_opponent_move

AWAITING = "awaiting"
WON = "won"
TIED = "tied"

OPPONENT_CHOICES = ("human", "engine")


class GameError(Exception):
    """Session used out of order."""


class GameOverError(GameError):
    pass


class NotYourTurnError(GameError):
    pass


@dataclass(frozen=True)
class Status:
    phase: str
    mark: int  # side to move while awaiting, winner when won, EMPTY when tied

    @property
    def is_over(self) -> bool:
        return self.phase in (WON, TIED)


@dataclass
class SessionConfig:
    """Session configuration, fixed before the first move."""

    # "human": both marks typed in; "engine": O is played by the heuristic
    opponent: str = "human"

    # Random seed for the engine's fallback move (None = unseeded)
    seed: Optional[int] = None

    def validate(self):
        if self.opponent not in OPPONENT_CHOICES:
            raise ValueError(
                f"opponent must be one of {OPPONENT_CHOICES}, got {self.opponent!r}"
            )

    @property
    def engine_mark(self) -> Optional[int]:
        return O if self.opponent == "engine" else None


class GameSession:
    """Owns the board and drives it through the game state machine."""

    def __init__(self, config: Optional[SessionConfig] = None):
        self.config = config or SessionConfig()
        self.config.validate()
        self.board = Board()
        self.history = MoveHistory()
        self.rng = np.random.default_rng(self.config.seed)
        self.scores: Dict[int, int] = {X: 0, O: 0, EMPTY: 0}
        self.games_played = 0
        self.status = Status(AWAITING, X)

    @property
    def turn(self) -> int:
        return self.board.turn

    def is_engine_turn(self) -> bool:
        return not self.status.is_over and self.config.engine_mark == self.board.turn

    def play(self, position: int) -> bool:
        """
        Play position for the (human) side to move.

        Returns:
            False if the position was rejected (no state change), True otherwise.
        """
        if self.status.is_over:
            raise GameOverError(f"game already finished ({self.status.phase}); start a new game")
        if self.is_engine_turn():
            raise NotYourTurnError("side to move is engine-controlled; use play_engine()")
        return self._apply(position)

    def play_engine(self) -> int:
        """Let the engine move for the side to move; returns the position played."""
        if self.status.is_over:
            raise GameOverError(f"game already finished ({self.status.phase}); start a new game")
        if not self.is_engine_turn():
            raise NotYourTurnError("side to move is not engine-controlled")

        mark = self.board.turn
        position = choose_opponent_move(self.board, mark, other(mark), self.rng)
        self._apply(position)
        return position

    def _apply(self, position: int) -> bool:
        mark = self.board.turn
        if not self.board.place_mark(position):
            return False
        self.history.add(mark, position)

        if self.board.check_win(mark):
            self._finish(Status(WON, mark))
        elif self.board.is_board_full():
            self._finish(Status(TIED, EMPTY))
        else:
            self.board.advance_turn()
            self.status = Status(AWAITING, self.board.turn)
        return True

    def new_game(self):
        """Reset board and history; the opponent role carries over."""
        self.board.reset()
        self.history.clear()
        self.status = Status(AWAITING, X)

    def _finish(self, status: Status):
        self.status = status
        self.scores[status.mark] += 1
        self.games_played += 1
