"""
Win checker for TicTacToe.
Finds the mark that owns three cells in a row, if any.
"""

from typing import Optional, Tuple

from .board import Board, Cell
from .config import GameConfig


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 cells with the same mark in a row
    (horizontally, vertically, or diagonally).
    Nothing is cached; every call scans the board again.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()

    def check_winner(self, board: Board) -> Optional[Cell]:
        """
        Check if there's a winner.

        Args:
            board: The board to check.

        Returns:
            The winning mark, or None if no winner yet.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        return board[line[0]]

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Lines are scanned in the order of WINNING_LINES and the first
        match is returned.

        Args:
            board: The board to check.

        Returns:
            The winning line as a tuple of cell indices, or None.
        """
        for line in self.config.WINNING_LINES:
            if self._check_line(board, line):
                return line
        return None

    def _check_line(self, board: Board, line: Tuple[int, int, int]) -> bool:
        """True if all cells of the line hold the same mark."""
        a, b, c = line
        first = board[a]
        if first == Cell.EMPTY:
            return False
        return first == board[b] == board[c]


_default_checker = WinChecker()


def winner(board: Board) -> Optional[Cell]:
    """Winning mark of a board, or None."""
    return _default_checker.check_winner(board)


def winning_line(board: Board) -> Optional[Tuple[int, int, int]]:
    """Cell indices of the first completed line, or None."""
    return _default_checker.get_winning_line(board)
