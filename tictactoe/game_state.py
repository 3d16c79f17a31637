"""
Game state management for TicTacToe.
Tracks the move history, which move is being viewed, and the display order.
"""

import logging
from enum import Enum
from typing import Iterator, List, Optional, Sequence, Tuple
from dataclasses import dataclass

from .config import GameConfig
from .errors import InvalidIndex
from .move import Board, Mark, Move
from .move_validator import MoveValidator
from .win_checker import Line, WinChecker

logger = logging.getLogger(__name__)


class Outcome(Enum):
    """Result of the game at a given board."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class Status:
    """Outcome of the viewed board, with the winning mark for a win."""
    outcome: Outcome
    winner: Optional[Mark] = None

    @property
    def is_terminal(self) -> bool:
        return self.outcome is not Outcome.IN_PROGRESS


@dataclass(frozen=True)
class MoveDescriptor:
    """One entry of the history list."""
    index: int
    label: str


class MoveDescriptions:
    """
    Lazy, restartable sequence of history entries.

    Labels are built while iterating, from the history, view index and
    order captured when the sequence was created. Reversal only changes
    iteration order; indices and labels stay tied to stored positions.
    """

    def __init__(
        self,
        history: Sequence[Move],
        view_index: int,
        reverse_order: bool,
        config: Optional[GameConfig] = None
    ):
        self._history = tuple(history)
        self._view_index = view_index
        self._reverse_order = reverse_order
        self._config = config or GameConfig()

    def __iter__(self) -> Iterator[MoveDescriptor]:
        indices = range(len(self._history))
        if self._reverse_order:
            indices = reversed(indices)
        for index in indices:
            yield MoveDescriptor(index=index, label=self._label(index))

    def __len__(self) -> int:
        return len(self._history)

    def _label(self, index: int) -> str:
        if index == 0:
            return self._config.START_LABEL

        move = self._history[index]
        template = (
            self._config.CURRENT_MOVE_LABEL if index == self._view_index
            else self._config.MOVE_LABEL
        )
        return template.format(index=index, mark=move.mark, location=move.location_text)


class GameState:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - History of Move snapshots (index 0 is the empty board)
    - Which move is being viewed (and played from)
    - History display order

    Everything else (whose turn, winner, draw) is derived from the
    viewed board. Playing while viewing an earlier move discards the
    moves after it.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        win_checker: Optional[WinChecker] = None,
        validator: Optional[MoveValidator] = None
    ):
        self.config = config or GameConfig()
        self.win_checker = win_checker or WinChecker()
        self.validator = validator or MoveValidator(self.win_checker)

        self._history: List[Move] = [Move.initial()]
        self._view_index = 0
        self.reverse_order = False

    @classmethod
    def create(cls, config: Optional[GameConfig] = None) -> "GameState":
        """Start a new game with only the empty board in history."""
        return cls(config=config)

    # ==================== STORED STATE ====================

    @property
    def history(self) -> Tuple[Move, ...]:
        """All recorded moves, oldest first."""
        return tuple(self._history)

    @property
    def view_index(self) -> int:
        return self._view_index

    @property
    def latest_index(self) -> int:
        return len(self._history) - 1

    @property
    def is_viewing_past(self) -> bool:
        return self._view_index < self.latest_index

    @property
    def current_move(self) -> Move:
        return self._history[self._view_index]

    @property
    def board(self) -> Board:
        return self.current_move.board

    # ==================== DERIVED STATE ====================

    @property
    def x_is_next(self) -> bool:
        return self._view_index % 2 == 0

    @property
    def next_mark(self) -> Mark:
        return Mark.X if self.x_is_next else Mark.O

    @property
    def winning_line(self) -> Optional[Line]:
        return self.win_checker.evaluate(self.board)

    @property
    def is_draw(self) -> bool:
        return self.win_checker.check_draw(self.board)

    @property
    def status(self) -> Status:
        """
        Outcome of the viewed board.

        Viewing an earlier move re-evaluates that board, so a past move
        can be in progress while the latest one is won.
        """
        line = self.winning_line
        if line is not None:
            return Status(Outcome.WON, Mark(self.board[line[0]]))
        if self.is_draw:
            return Status(Outcome.DRAW)
        return Status(Outcome.IN_PROGRESS)

    @property
    def winner(self) -> Optional[Mark]:
        return self.status.winner

    @property
    def status_message(self) -> str:
        """Status line for display, e.g. "Next player: X"."""
        status = self.status
        if status.outcome is Outcome.WON:
            return self.config.WINNER_MESSAGE.format(mark=status.winner)
        if status.outcome is Outcome.DRAW:
            return self.config.DRAW_MESSAGE
        return self.config.NEXT_PLAYER_MESSAGE.format(mark=self.next_mark)

    @property
    def order_label(self) -> str:
        return self.config.REVERSED_HINT if self.reverse_order else ""

    def empty_cells(self) -> List[int]:
        """Indices of the empty cells on the viewed board."""
        return [i for i, cell in enumerate(self.board) if cell == Mark.EMPTY]

    # ==================== OPERATIONS ====================

    def play_at(self, cell_index: int) -> "GameState":
        """
        Place the next mark on the viewed board.

        Moves after the viewed one are discarded before the new move is
        appended. Plays on an occupied cell, an out-of-range cell or a
        finished board are ignored.

        Args:
            cell_index: Cell index (0-8).

        Returns:
            This game state.
        """
        result = self.validator.validate_move(self, cell_index)
        if not result.is_valid:
            logger.debug("Ignoring play at %r: %s", cell_index, result.error_message)
            return self

        mark = self.next_mark
        move = self.current_move.next_move(cell_index, mark)

        discarded = self.latest_index - self._view_index
        if discarded:
            logger.debug("Discarding %d move(s) after move #%d", discarded, self._view_index)

        del self._history[self._view_index + 1:]
        self._history.append(move)
        self._view_index = self.latest_index

        logger.debug("Move #%d: %s@%s", self._view_index, mark, move.location_text)

        status = self.status
        if status.outcome is Outcome.WON:
            logger.info("%s wins at move #%d with line %s", status.winner, self._view_index, self.winning_line)
        elif status.outcome is Outcome.DRAW:
            logger.info("Draw at move #%d", self._view_index)

        return self

    def jump_to(self, move_index: int) -> "GameState":
        """
        View a recorded move. History is not changed.

        Raises:
            InvalidIndex: If move_index is not a valid history index.
        """
        if (isinstance(move_index, bool) or not isinstance(move_index, int)
                or not 0 <= move_index < len(self._history)):
            raise InvalidIndex(move_index, len(self._history))

        self._view_index = move_index
        logger.debug("Viewing move #%d of %d", move_index, self.latest_index)
        return self

    def toggle_order(self) -> "GameState":
        """Flip the history display order."""
        self.reverse_order = not self.reverse_order
        return self

    def describe_moves(self) -> MoveDescriptions:
        """History entries in display order."""
        return MoveDescriptions(self._history, self._view_index, self.reverse_order, self.config)

    def board_to_text(self) -> str:
        """Render the viewed board as text, one row per line."""
        size = GameConfig.BOARD_SIZE
        rows = []
        for row in range(size):
            cells = self.board[row * size:(row + 1) * size]
            rows.append(" | ".join(cell.value or " " for cell in cells))
        separator = "\n" + "-" * (size * 4 - 3) + "\n"
        return separator.join(rows)
