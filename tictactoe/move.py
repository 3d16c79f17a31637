"""
Moves for the TicTacToe engine.
A Move is an immutable snapshot of the whole board after one placement.
"""

from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass

from .config import GameConfig


class Mark(str, Enum):
    """The symbol in a cell."""
    X = "X"
    O = "O"
    EMPTY = ""

    def __str__(self) -> str:
        return self.value


Board = Tuple[Mark, ...]


@dataclass(frozen=True)
class Move:
    """
    A move in the game.

    The root move (game start) has an empty mark, no location and an
    all-empty board. Every other move differs from the one it was built
    from in exactly one cell.
    """
    mark: Mark                          # Who made the move
    location: Optional[Tuple[int, int]]  # (row, col), 1-indexed
    board: Board                        # 9 cells, row-major

    @classmethod
    def initial(cls) -> "Move":
        """Create the root move with an empty board."""
        return cls(mark=Mark.EMPTY, location=None, board=(Mark.EMPTY,) * GameConfig.CELL_COUNT)

    @property
    def location_text(self) -> str:
        """Location as shown in history labels, e.g. "(1,3)"."""
        if self.location is None:
            return ""
        row, col = self.location
        return f"({row},{col})"

    def next_move(self, cell_index: int, mark: Mark) -> "Move":
        """
        Build the move that places a mark on this board.

        Args:
            cell_index: Cell to place on (0-8).
            mark: The mark to place.

        Returns:
            A new Move; this one is left untouched.
        """
        size = GameConfig.BOARD_SIZE
        location = (cell_index // size + 1, cell_index % size + 1)
        board = list(self.board)
        board[cell_index] = mark
        return Move(mark=mark, location=location, board=tuple(board))
