"""
TicTacToe with time travel
==========================
Two-player TicTacToe that keeps every board reached so far.
Any earlier board can be viewed again, and playing from it
starts a new branch of the history.

The logic package handles the board, win detection, move
validation and the history itself. It never draws anything.
"""

__version__ = "1.0.0"

from .board import Board, Cell
from .config import GameConfig
from .win_checker import WinChecker, winner, winning_line
from .move_validator import MoveValidator, ValidationResult
from .game_history import GameHistory, MoveDescriptor
