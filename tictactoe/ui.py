"""
TicTacToe UI
A graphical interface for the game using Tkinter.

Shows:
- The 3x3 board, with the winning line highlighted
- Game status (next player, winner or draw)
- Move history, each entry jumps back to that move
- A toggle for the history order
"""

import logging
import tkinter as tk
from tkinter import ttk
from typing import List, Optional

from .config import GameConfig
from .game_state import GameState
from .move import Mark

logger = logging.getLogger(__name__)


class TicTacToeUI:
    """
    Main UI class for the game.

    Renders the GameState and forwards clicks to it; all rules live in
    the engine.
    """

    def __init__(
        self,
        game_state: Optional[GameState] = None,
        config: Optional[GameConfig] = None,
        root: Optional[tk.Misc] = None
    ):
        """
        Initialize the UI.

        Args:
            game_state: Game to show. A new game is created if omitted.
            config: UI settings.
            root: Parent widget. A new Tk window is created if omitted.
        """
        self.config = config or GameConfig()
        self.game_state = game_state or GameState.create(self.config)
        self.root = root if root is not None else tk.Tk()

        self.board_cells: List[tk.Button] = []
        self.history_buttons: List[tk.Button] = []

        self._create_ui()
        self.refresh()

    def _create_ui(self):
        """Create the Tkinter widgets."""
        if isinstance(self.root, (tk.Tk, tk.Toplevel)):
            self.root.title(self.config.WINDOW_TITLE)
            self.root.configure(bg=self.config.BACKGROUND)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Left panel - board
        left_frame = ttk.Frame(main_frame)
        left_frame.pack(side=tk.LEFT, fill=tk.Y, padx=(0, 10))

        self.status_label = ttk.Label(left_frame, text="", font=self.config.LABEL_FONT)
        self.status_label.pack(pady=(0, 10))

        board_frame = ttk.Frame(left_frame)
        board_frame.pack()

        size = GameConfig.BOARD_SIZE
        for index in range(GameConfig.CELL_COUNT):
            cell = tk.Button(
                board_frame,
                text="",
                font=self.config.CELL_FONT,
                width=3,
                height=1,
                bg=self.config.CELL_BACKGROUND,
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._on_cell_click(i)
            )
            cell.grid(row=index // size, column=index % size, padx=2, pady=2)
            self.board_cells.append(cell)

        # Right panel - history
        right_frame = ttk.Frame(main_frame)
        right_frame.pack(side=tk.RIGHT, fill=tk.BOTH, expand=True)

        controls = ttk.Frame(right_frame)
        controls.pack(fill=tk.X)

        self.toggle_btn = ttk.Button(
            controls,
            text=self.config.TOGGLE_BUTTON_TEXT,
            command=self._on_toggle_order
        )
        self.toggle_btn.pack(side=tk.LEFT)

        self.order_label = ttk.Label(controls, text="")
        self.order_label.pack(side=tk.LEFT, padx=5)

        self.history_frame = ttk.Frame(right_frame)
        self.history_frame.pack(fill=tk.BOTH, expand=True, pady=(10, 0))

    # ==================== USER INTENTS ====================

    def _on_cell_click(self, index: int):
        self.game_state.play_at(index)
        self.refresh()

    def _on_history_click(self, move_index: int):
        self.game_state.jump_to(move_index)
        self.refresh()

    def _on_toggle_order(self):
        self.game_state.toggle_order()
        self.refresh()

    # ==================== RENDERING ====================

    def refresh(self):
        """Redraw everything from the game state."""
        self._update_board_display()
        self._update_game_info()
        self._update_history()

    def _update_board_display(self):
        """Update the board grid display."""
        board = self.game_state.board
        winning_line = self.game_state.winning_line or ()

        for index, cell in enumerate(self.board_cells):
            mark = board[index]
            bg_color = (
                self.config.HIGHLIGHT_BACKGROUND if index in winning_line
                else self.config.CELL_BACKGROUND
            )
            fg_color = self.config.X_COLOR if mark == Mark.X else self.config.O_COLOR
            cell.configure(text=mark.value, bg=bg_color, fg=fg_color)

    def _update_game_info(self):
        """Update status and order labels."""
        self.status_label.configure(text=self.game_state.status_message)
        self.order_label.configure(text=self.game_state.order_label)

    def _update_history(self):
        """Rebuild the history list."""
        for button in self.history_buttons:
            button.destroy()
        self.history_buttons = []

        for descriptor in self.game_state.describe_moves():
            button = tk.Button(
                self.history_frame,
                text=f"{descriptor.index}. {descriptor.label}",
                anchor='w',
                command=lambda i=descriptor.index: self._on_history_click(i)
            )
            if descriptor.index == self.game_state.view_index:
                button.configure(relief='sunken')
            button.pack(fill=tk.X, pady=1)
            self.history_buttons.append(button)

    def run(self):
        """Run the UI main loop."""
        logger.info("Starting %s", self.config.WINDOW_TITLE)
        self.root.mainloop()
