"""
Win checker for TicTacToe.
Checks if a board has a winning line or is a draw.
"""

from typing import Optional, Sequence, Tuple

from .config import GameConfig
from .move import Mark

Line = Tuple[int, int, int]


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 identical marks in a row
    (horizontally, vertically, or diagonally)

    Lines are checked in a fixed order and the first complete one wins,
    so a board with several complete lines always reports the same one.
    """

    # All possible winning lines (as cell indices, row-major)
    WINNING_LINES: Tuple[Line, ...] = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    def evaluate(self, board: Sequence[Mark]) -> Optional[Line]:
        """
        Find the winning line on a board.

        Args:
            board: 9 cells, row-major.

        Returns:
            The winning triple of cell indices, or None if no winner.

        Raises:
            ValueError: If the board does not have 9 cells.
        """
        if len(board) != GameConfig.CELL_COUNT:
            raise ValueError(
                f"Board must have {GameConfig.CELL_COUNT} cells, got {len(board)}"
            )

        for line in self.WINNING_LINES:
            if self._check_line(board, line):
                return line

        return None

    def _check_line(self, board: Sequence[Mark], line: Line) -> bool:
        """True if all 3 cells of the line hold the same non-empty mark."""
        a, b, c = line
        if board[a] == Mark.EMPTY:
            return False
        return board[a] == board[b] == board[c]

    def check_winner(self, board: Sequence[Mark]) -> Optional[Mark]:
        """
        Check if there's a winner.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        line = self.evaluate(board)
        if line is None:
            return None
        return Mark(board[line[0]])

    def check_draw(self, board: Sequence[Mark]) -> bool:
        """
        Check if the board is a draw.

        A draw occurs when all cells are filled AND there is no winner.
        """
        if self.evaluate(board) is not None:
            return False
        return all(cell != Mark.EMPTY for cell in board)
