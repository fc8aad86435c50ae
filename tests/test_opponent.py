import numpy as np
import pytest

from tictactoe.game import EMPTY, O, X, Board, legal_moves
from tictactoe.opponent import (
    HeuristicOpponent,
    choose_opponent_move,
    completes_line,
    find_winning_move,
    random_move,
)


def make_board(xs=(), os=(), turn=X):
    cells = [EMPTY] * 9
    for p in xs:
        cells[p] = X
    for p in os:
        cells[p] = O
    return Board.from_cells(cells, turn)


def test_find_winning_move_returns_lowest_index():
    # X threatens 2 (row), 7 (column) and 8 (diagonal)
    board = make_board(xs=(0, 1, 4), os=(3, 5))
    assert find_winning_move(board, X) == 2


def test_find_winning_move_none_without_threat():
    board = make_board(xs=(0,), os=(4,))
    assert find_winning_move(board, X) is None
    assert find_winning_move(board, O) is None


def test_find_winning_move_ignores_occupied_completion():
    # 0 and 1 are X but 2 is taken by O
    board = make_board(xs=(0, 1), os=(2,))
    assert find_winning_move(board, X) is None


@pytest.mark.parametrize("xs,os", [
    ((0, 1, 4), (3, 5)),
    ((0, 4), (1,)),
    ((), ()),
    ((0, 2, 3, 7), (1, 4, 5, 6)),
])
def test_find_winning_move_never_mutates(xs, os):
    board = make_board(xs=xs, os=os, turn=O)
    before = board.snapshot()
    find_winning_move(board, X)
    find_winning_move(board, O)
    assert board.snapshot() == before
    assert board.turn == O


def test_find_winning_move_accepts_plain_sequences():
    cells = [O, EMPTY, O, X, X, EMPTY, EMPTY, EMPTY, EMPTY]
    assert find_winning_move(cells, O) == 1
    assert find_winning_move(cells, X) == 5
    assert cells == [O, EMPTY, O, X, X, EMPTY, EMPTY, EMPTY, EMPTY]


def test_completes_line():
    cells = [X, X, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY]
    assert completes_line(cells, 2, X)
    assert not completes_line(cells, 2, O)
    assert not completes_line(cells, 5, X)


def test_opponent_takes_win_over_block(rng):
    # O can win at 5, X threatens 2
    board = make_board(xs=(0, 1, 8), os=(3, 4), turn=O)
    assert choose_opponent_move(board, O, X, rng) == 5


def test_opponent_blocks_when_it_cannot_win(rng):
    # X threatens 8 on the diagonal, O has nothing
    board = make_board(xs=(0, 4), os=(1,), turn=O)
    assert choose_opponent_move(board, O, X, rng) == 8


def test_opponent_random_move_is_an_empty_cell():
    board = make_board(xs=(0,), os=(4,), turn=X)
    empty = set(board.empty_cells())
    for seed in range(25):
        move = choose_opponent_move(board, O, X, np.random.default_rng(seed))
        assert move in empty
    assert board.snapshot() == make_board(xs=(0,), os=(4,)).snapshot()


def test_opponent_random_move_without_rng(board):
    assert choose_opponent_move(board, O, X) in range(9)


def test_random_move_covers_all_empty_cells(rng):
    board = make_board(xs=(0, 4), os=(8,))
    seen = {random_move(board, rng) for _ in range(300)}
    assert seen == set(legal_moves(board.cells))


def test_random_move_full_board_raises(tie_cells):
    with pytest.raises(ValueError):
        random_move(Board.from_cells(tie_cells))
    with pytest.raises(ValueError):
        choose_opponent_move(Board.from_cells(tie_cells), O, X)


def test_heuristic_opponent_plays_its_own_mark(rng):
    engine = HeuristicOpponent(X, rng)
    board = make_board(xs=(6, 7), os=(0, 1))
    # X to win at 8 beats blocking O at 2
    assert engine.move(board) == 8
    assert engine(board) == 8


def test_heuristic_opponent_needs_a_player_mark():
    with pytest.raises(ValueError):
        HeuristicOpponent(EMPTY)
    with pytest.raises(ValueError):
        HeuristicOpponent(2)
