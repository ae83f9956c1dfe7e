"""
Display module for TicTacToe.
Draws boards into images for the UI and for saved snapshots.
"""

from .config import DisplayConfig
from .board_renderer import BoardRenderer
