"""Tests for the Tkinter UI. Skipped when no display is available."""

import pytest

tk = pytest.importorskip("tkinter")

from tictactoe import GameConfig, GameState  # noqa: E402
from tictactoe.ui import TicTacToeUI  # noqa: E402


@pytest.fixture
def root():
    try:
        window = tk.Tk()
    except tk.TclError:
        pytest.skip("no display available")
    window.withdraw()
    yield window
    window.destroy()


@pytest.fixture
def ui(root):
    return TicTacToeUI(root=root)


def cell_texts(ui):
    return [cell.cget("text") for cell in ui.board_cells]


def history_texts(ui):
    return [button.cget("text") for button in ui.history_buttons]


def test_initial_render(ui):
    assert cell_texts(ui) == [""] * 9
    assert str(ui.status_label.cget("text")) == "Next player: X"
    assert history_texts(ui) == ["0. Go to game start"]


def test_cell_click_plays(ui):
    ui.board_cells[0].invoke()
    assert cell_texts(ui)[0] == "X"
    assert str(ui.status_label.cget("text")) == "Next player: O"
    assert history_texts(ui)[1] == "1. You are at move #1 -- X@(1,1)"


def test_winning_line_is_highlighted(ui):
    for index in (0, 3, 1, 4, 2):
        ui.board_cells[index].invoke()

    assert str(ui.status_label.cget("text")) == "Winner: X"
    for index in (0, 1, 2):
        assert ui.board_cells[index].cget("bg") == GameConfig.HIGHLIGHT_BACKGROUND
    assert ui.board_cells[3].cget("bg") == GameConfig.CELL_BACKGROUND


def test_history_click_jumps(ui):
    for index in (0, 4, 8):
        ui.board_cells[index].invoke()

    ui.history_buttons[1].invoke()
    assert ui.game_state.view_index == 1
    assert cell_texts(ui) == ["X", "", "", "", "", "", "", "", ""]
    assert len(ui.game_state.history) == 4


def test_toggle_reverses_history_list(ui):
    ui.board_cells[0].invoke()
    ui.toggle_btn.invoke()

    assert str(ui.order_label.cget("text")) == "(Reversed)"
    assert history_texts(ui) == [
        "1. You are at move #1 -- X@(1,1)",
        "0. Go to game start",
    ]


def test_shows_existing_game(root):
    game = GameState.create()
    game.play_at(4)
    ui = TicTacToeUI(game_state=game, root=root)
    assert cell_texts(ui)[4] == "X"
