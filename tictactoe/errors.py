"""
Exceptions raised by the TicTacToe engine.

Illegal plays (occupied cell, finished board) are not errors: the engine
ignores them. Only caller bugs are surfaced.
"""


class TicTacToeError(Exception):
    """Base class for all engine errors."""


class InvalidIndex(TicTacToeError, IndexError):
    """A history index outside [0, len(history) - 1] was requested."""

    def __init__(self, index, history_length: int):
        self.index = index
        self.history_length = history_length
        super().__init__(
            f"Move index {index!r} out of range "
            f"(history has {history_length} moves, valid: 0-{history_length - 1})"
        )
