"""
TicTacToe with time travel
==========================
A two-player tic-tac-toe engine that keeps every move as an immutable
board snapshot, so any earlier move can be viewed and played from.
Playing from an earlier move discards the moves after it.
"""

from .config import GameConfig
from .errors import TicTacToeError, InvalidIndex
from .move import Mark, Move
from .win_checker import WinChecker
from .move_validator import MoveValidator, ValidationResult
from .game_state import GameState, Outcome, Status, MoveDescriptor, MoveDescriptions

__version__ = "1.0.0"
