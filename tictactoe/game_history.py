"""
Game history for TicTacToe.
Keeps every board reached so far and which one is being viewed.
"""

import logging
from typing import List, NamedTuple, Optional, Tuple

from .board import Board, Cell, as_index
from .config import GameConfig
from .move_validator import MoveValidator
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


class MoveDescriptor(NamedTuple):
    """One entry of the jump-to-move list."""
    label: str
    index: int


class GameHistory:
    """
    The state of one game session.

    Tracks:
    - Every board reached so far, starting with the empty board
    - The viewed index, the board currently shown and played on

    Whose turn it is and the status line are derived from the viewed
    index and board on every call.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()
        self.win_checker = WinChecker(self.config)
        self.validator = MoveValidator(self.win_checker, self.config)

        self._boards: List[Board] = [Board.empty()]
        self._viewed_index = 0

    def __len__(self) -> int:
        return len(self._boards)

    def __repr__(self) -> str:
        return f"GameHistory(moves={len(self._boards) - 1}, viewed={self._viewed_index})"

    @property
    def viewed_index(self) -> int:
        return self._viewed_index

    @property
    def boards(self) -> Tuple[Board, ...]:
        """All boards of the active branch, oldest first."""
        return tuple(self._boards)

    def current_board(self) -> Board:
        """Get the board at the viewed index."""
        return self._boards[self._viewed_index]

    def next_mark(self) -> Cell:
        """X on even indices, O on odd ones."""
        first = Cell(self.config.FIRST_MARK)
        return first if self._viewed_index % 2 == 0 else first.opposite()

    def winner(self) -> Optional[Cell]:
        return self.win_checker.check_winner(self.current_board())

    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        return self.win_checker.get_winning_line(self.current_board())

    def is_game_over(self) -> bool:
        return self.winner() is not None

    def play_move(self, cell_index: int) -> bool:
        """
        Play the current mark on a cell of the viewed board.

        Boards after the viewed index are dropped before the new
        board is added, so playing from an earlier board replaces
        the rest of the history.

        Args:
            cell_index: Cell to mark (0-8).

        Returns:
            True if the move was played, False if it was rejected.
            A rejected move changes nothing.
        """
        board = self.current_board()
        result = self.validator.validate_move(board, cell_index)
        if not result.is_valid:
            logger.debug("Move at %r ignored: %s", cell_index, result.error_message)
            return False

        cell_index = as_index(cell_index)
        mark = self.next_mark()
        next_board = board.place(cell_index, mark)

        dropped = len(self._boards) - self._viewed_index - 1
        if dropped:
            logger.debug("Dropping %d board(s) after move #%d", dropped, self._viewed_index)
        del self._boards[self._viewed_index + 1:]

        self._boards.append(next_board)
        self._viewed_index = len(self._boards) - 1
        logger.debug("%s played cell %d (move #%d)", mark, cell_index, self._viewed_index)
        return True

    def jump_to(self, index: int):
        """
        View an earlier (or later) board without changing the history.

        Args:
            index: History index, 0 <= index < len(history).

        Raises:
            IndexError: If the index is not in the history, or is not
                an integer.
        """
        position = as_index(index)
        if position is None or not 0 <= position < len(self._boards):
            raise IndexError(
                f"Move #{index!r} is not in the history (0-{len(self._boards) - 1})"
            )
        self._viewed_index = position
        logger.debug("Jumped to move #%d", position)

    def status(self) -> str:
        """
        Get the status line for the viewed board.

        A full board without a winner still reads "Next player".
        """
        found = self.winner()
        if found is not None:
            return self.config.STATUS_WINNER.format(mark=found)
        return self.config.STATUS_NEXT_PLAYER.format(mark=self.next_mark())

    def move_descriptors(self) -> List[MoveDescriptor]:
        """
        Get the jump-to-move list, oldest first.

        Returns:
            One (label, index) pair per board in the history.
        """
        descriptors = []
        for index in range(len(self._boards)):
            if index > 0:
                label = self.config.MOVE_LABEL.format(index=index)
            else:
                label = self.config.START_LABEL
            descriptors.append(MoveDescriptor(label, index))
        return descriptors
