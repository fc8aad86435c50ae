"""
TicTacToe with a rule-based opponent.

Human vs human, or human vs an engine that wins when it can, blocks when it
must and otherwise plays a random empty cell.
"""

from .game import (
    EMPTY,
    X,
    O,
    WIN_LINES,
    Board,
    other,
    check_win,
    winning_line,
    is_board_full,
    legal_moves,
)
from .opponent import find_winning_move, choose_opponent_move, random_move, HeuristicOpponent
from .history import Move, MoveHistory
from .session import (
    AWAITING,
    WON,
    TIED,
    Status,
    SessionConfig,
    GameSession,
    GameError,
    GameOverError,
    NotYourTurnError,
)
from .eval import EvalConfig, play_game, eval_vs_random, eval_self_play

__version__ = "0.1.0"
__all__ = [
    "EMPTY",
    "X",
    "O",
    "WIN_LINES",
    "Board",
    "other",
    "check_win",
    "winning_line",
    "is_board_full",
    "legal_moves",
    "find_winning_move",
    "choose_opponent_move",
    "random_move",
    "HeuristicOpponent",
    "Move",
    "MoveHistory",
    "AWAITING",
    "WON",
    "TIED",
    "Status",
    "SessionConfig",
    "GameSession",
    "GameError",
    "GameOverError",
    "NotYourTurnError",
    "EvalConfig",
    "play_game",
    "eval_vs_random",
    "eval_self_play",
]
