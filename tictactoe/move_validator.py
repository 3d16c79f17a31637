"""
Move validator for TicTacToe.
Validates that plays follow the rules.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional
from dataclasses import dataclass

from .config import GameConfig
from .move import Mark
from .win_checker import WinChecker

if TYPE_CHECKING:
    from .game_state import GameState


@dataclass(frozen=True)
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe plays against the currently viewed board.

    Rules:
    1. Cell index must be 0-8
    2. Can only place on empty cells
    3. The viewed board must not be won or drawn
    """

    def __init__(self, win_checker: Optional[WinChecker] = None):
        self.win_checker = win_checker or WinChecker()

    def validate_move(self, game_state: GameState, cell_index: int) -> ValidationResult:
        """
        Validate a play.

        Args:
            game_state: Current game state.
            cell_index: Cell to place a mark on (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if isinstance(cell_index, bool) or not isinstance(cell_index, int):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {cell_index!r}. Must be an integer."
            )

        if not 0 <= cell_index < GameConfig.CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {cell_index}. Must be 0-{GameConfig.CELL_COUNT - 1}."
            )

        board = game_state.board

        winner = self.win_checker.check_winner(board)
        if winner is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Game is already over! {winner} won at move #{game_state.view_index}."
            )

        if self.win_checker.check_draw(board):
            return ValidationResult(
                is_valid=False,
                error_message=f"Game is already over! Draw at move #{game_state.view_index}."
            )

        if board[cell_index] != Mark.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {cell_index} is already occupied by {board[cell_index]}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all playable cells on the viewed board.

        Returns:
            List of cell indices, empty if the viewed board is finished.
        """
        board = game_state.board
        if self.win_checker.evaluate(board) is not None:
            return []

        return [i for i, cell in enumerate(board) if cell == Mark.EMPTY]
