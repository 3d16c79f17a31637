"""Shared pytest fixtures for the TicTacToe engine tests."""

import pytest

from tictactoe import GameState, Mark

X, O, _ = Mark.X, Mark.O, Mark.EMPTY


def play(game_state, *cells):
    """Play a sequence of cells, alternating marks from the viewed move."""
    for cell in cells:
        game_state.play_at(cell)
    return game_state


@pytest.fixture
def game():
    return GameState.create()


@pytest.fixture
def x_wins_top_row(game):
    # X: 0, 1, 2  O: 3, 4
    return play(game, 0, 3, 1, 4, 2)


@pytest.fixture
def drawn_game(game):
    # Ends on [X,O,X, X,O,O, O,X,X]
    return play(game, 0, 1, 2, 4, 3, 5, 7, 6, 8)
