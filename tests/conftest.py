"""
Shared fixtures for Gomoku tests.
"""
import pytest

from gomoku_history.core.game import new_game


# Black: (0,0) (0,1) (0,2) (0,3) (0,4); White: (1,0) (1,1) (1,2) (1,3)
ROW_WIN_MOVES = [0, 15, 1, 16, 2, 17, 3, 18, 4]


@pytest.fixture
def game():
    """Fresh 15x15 game, five in a row."""
    return new_game().unwrap()


@pytest.fixture
def won_game():
    """Game where Black has just completed row 0, columns 0-4."""
    game = new_game().unwrap()
    for cell in ROW_WIN_MOVES:
        assert game.play_move(cell).ok
    return game
