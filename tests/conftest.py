import numpy as np
import pytest

from tictactoe.game import O, X, Board


@pytest.fixture
def board():
    return Board()


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def tie_cells():
    # X O X / X O O / O X X - full, no line
    return [
        X, O, X,
        X, O, O,
        O, X, X,
    ]
