import pytest

from tictactoe.eval import eval_self_play, eval_vs_random, play_game, random_policy
from tictactoe.game import EMPTY, O, X, Board
from tictactoe.opponent import HeuristicOpponent


def first_empty(board: Board) -> int:
    return board.empty_cells()[0]


def test_play_game_first_empty_vs_first_empty():
    # X fills 0, 2, 4, 6 and wins on the 2-4-6 diagonal
    winner, moves = play_game(first_empty, first_empty)
    assert winner == X
    assert moves == [0, 1, 2, 3, 4, 5, 6]


def test_play_game_rejects_illegal_policy():
    with pytest.raises(ValueError):
        play_game(lambda board: 0, lambda board: 0)


def test_engine_game_has_no_repeated_moves(rng):
    winner, moves = play_game(first_empty, HeuristicOpponent(O, rng))
    assert winner in (X, O, EMPTY)
    assert len(moves) == len(set(moves))


def test_eval_vs_random_rates(rng):
    w, d, l = eval_vs_random(games=40, rng=rng, progress=False)
    assert w + d + l == pytest.approx(1.0)
    assert w > l


def test_eval_self_play(rng):
    res = eval_self_play(games=30, rng=rng, progress=False)
    assert res["games"] == 30
    assert res["x_w"] + res["o_w"] + res["d"] == pytest.approx(1.0)
    assert 5 <= res["avg_len"] <= 9


def test_random_policy_plays_empty_cells(rng):
    policy = random_policy(rng)
    board = Board.from_cells([X, O, X, O, X, O, EMPTY, EMPTY, O])
    for _ in range(20):
        assert policy(board) in (6, 7)


@pytest.mark.parametrize("games", [0, -3])
def test_eval_rejects_non_positive_game_counts(games):
    with pytest.raises(ValueError):
        eval_vs_random(games=games, progress=False)
    with pytest.raises(ValueError):
        eval_self_play(games=games, progress=False)
