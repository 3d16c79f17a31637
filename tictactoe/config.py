"""
Configuration for the TicTacToe game engine and its Tkinter view.
All the settings for board geometry, history labels, and the UI.
"""

import logging


class GameConfig:
    """
    Configuration class for game settings.
    Subclass to customize labels, messages and the UI.
    Board settings are read from this class directly and stay 3x3.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, cells are indexed 0-8 row-major
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE

    # ==================== HISTORY LABELS ====================
    START_LABEL = "Go to game start"
    CURRENT_MOVE_LABEL = "You are at move #{index} -- {mark}@{location}"
    MOVE_LABEL = "Go to move #{index} -- {mark}@{location}"
    REVERSED_HINT = "(Reversed)"

    # ==================== STATUS MESSAGES ====================
    WINNER_MESSAGE = "Winner: {mark}"
    DRAW_MESSAGE = "It's a draw!"
    NEXT_PLAYER_MESSAGE = "Next player: {mark}"

    # ==================== UI SETTINGS ====================
    WINDOW_TITLE = "Tic-Tac-Toe"
    TOGGLE_BUTTON_TEXT = "Toggle move order"
    BACKGROUND = '#1a1a2e'
    CELL_BACKGROUND = '#16213e'
    HIGHLIGHT_BACKGROUND = '#065f46'
    X_COLOR = '#f87171'
    O_COLOR = '#10b981'
    CELL_FONT = ('Segoe UI', 24, 'bold')
    LABEL_FONT = ('Segoe UI', 11)

    # ==================== DEBUG SETTINGS ====================
    LOG_LEVEL = logging.WARNING
    LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"
