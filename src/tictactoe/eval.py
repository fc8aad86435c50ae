"""
Evaluation functions.

Measures the heuristic engine against a uniformly random player and
against itself.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np
from tqdm.auto import trange

from .game import EMPTY, O, X, Board
from .opponent import HeuristicOpponent, random_move

Policy = Callable[[Board], int]


@dataclass
class EvalConfig:
    """Evaluation configuration."""

    # Games per matchup
    games: int = 500

    # Random seed (None = unseeded)
    seed: Optional[int] = None

    # Paths
    save_dir: str = "runs"


def random_policy(rng: np.random.Generator) -> Policy:
    return lambda board: random_move(board, rng)


def play_game(x_policy: Policy, o_policy: Policy) -> Tuple[int, List[int]]:
    """
    Play one full game between two policies.

    Returns:
        (winner, moves) where winner is +1/-1/0 and moves the positions in order
    """
    board = Board()
    moves: List[int] = []

    while True:
        policy = x_policy if board.turn == X else o_policy
        action = policy(board)
        mark = board.turn
        if not board.place_mark(action):
            raise ValueError(f"policy for {mark:+d} chose illegal move {action}")
        moves.append(action)

        if board.check_win(mark):
            return mark, moves
        if board.is_board_full():
            return EMPTY, moves
        board.advance_turn()


def eval_vs_random(
    games: int = 500,
    rng: Optional[np.random.Generator] = None,
    progress: bool = True,
) -> Tuple[float, float, float]:
    """
    Evaluate the heuristic engine vs a random opponent, alternating sides.

    Returns:
        (win_rate, draw_rate, loss_rate) from the engine's point of view
    """
    if games <= 0:
        raise ValueError(f"games must be positive, got {games}")
    if rng is None:
        rng = np.random.default_rng()
    wins = draws = losses = 0
    rand = random_policy(rng)

    for g in trange(games, desc="vs random", disable=not progress):
        engine_side = X if (g % 2 == 0) else O
        engine = HeuristicOpponent(engine_side, rng)
        if engine_side == X:
            winner, _ = play_game(engine, rand)
        else:
            winner, _ = play_game(rand, engine)

        if winner == EMPTY:
            draws += 1
        elif winner == engine_side:
            wins += 1
        else:
            losses += 1

    total = wins + draws + losses
    return wins / total, draws / total, losses / total


def eval_self_play(
    games: int = 100,
    rng: Optional[np.random.Generator] = None,
    progress: bool = True,
) -> Dict[str, float]:
    """
    Engine vs engine.

    Returns:
        Dict with 'games', 'x_w', 'o_w', 'd' and 'avg_len'
    """
    if games <= 0:
        raise ValueError(f"games must be positive, got {games}")
    if rng is None:
        rng = np.random.default_rng()
    x_engine = HeuristicOpponent(X, rng)
    o_engine = HeuristicOpponent(O, rng)
    results = {X: 0, O: 0, EMPTY: 0}
    lengths = []

    for _ in trange(games, desc="self-play", disable=not progress):
        winner, moves = play_game(x_engine, o_engine)
        results[winner] += 1
        lengths.append(len(moves))

    return {
        "games": games,
        "x_w": results[X] / games,
        "o_w": results[O] / games,
        "d": results[EMPTY] / games,
        "avg_len": float(np.mean(lengths)),
    }
