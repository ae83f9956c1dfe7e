"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, List
from dataclasses import dataclass

from .board import Board, as_index
from .config import GameConfig
from .win_checker import WinChecker


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves against a board.

    Rules:
    1. Game must not be over (no winner on the board)
    2. Cell index must be 0-8
    3. Can only place on empty cells
    """

    def __init__(
        self,
        win_checker: Optional[WinChecker] = None,
        config: Optional[GameConfig] = None
    ):
        self.config = config or GameConfig()
        self.win_checker = win_checker or WinChecker(self.config)

    def validate_move(self, board: Board, cell_index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: The board the move is played on.
            cell_index: Cell to mark (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        found = self.win_checker.check_winner(board)
        if found is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Game is already over! {found} has won."
            )

        # Check if index is in valid range (bools and floats are not cells)
        last = self.config.CELL_COUNT - 1
        index = as_index(cell_index)
        if index is None or not 0 <= index <= last:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {cell_index!r}. Must be 0-{last}."
            )

        # Check if cell is empty
        if not board.is_empty(index):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {board[index]}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board) -> List[int]:
        """
        Get all valid moves on a board.

        Returns:
            List of empty cell indices, empty once the game is won.
        """
        if self.win_checker.check_winner(board) is not None:
            return []
        return board.empty_cells()
