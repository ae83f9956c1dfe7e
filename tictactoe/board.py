"""
Board model for TicTacToe.
A board is an immutable snapshot of the 9 cells, so old boards
kept in the history stay valid after later moves.
"""

import operator
from enum import Enum
from typing import Iterator, List, Optional, Tuple
from dataclasses import dataclass, field

from .config import GameConfig


class Cell(Enum):
    """The three states of a cell. X and O are the marks."""
    EMPTY = ""
    X = "X"
    O = "O"

    def opposite(self) -> "Cell":
        """Get the other mark."""
        if self == Cell.EMPTY:
            raise ValueError("An empty cell has no opposite mark")
        return Cell.O if self == Cell.X else Cell.X

    @property
    def is_mark(self) -> bool:
        return self != Cell.EMPTY

    def __str__(self) -> str:
        return self.value


def as_index(value) -> Optional[int]:
    """
    Convert an integer-like value (int, numpy integer) to an int.

    Returns None for anything else, including bools and floats.
    """
    if isinstance(value, bool):
        return None
    try:
        return operator.index(value)
    except TypeError:
        return None


@dataclass(frozen=True)
class Board:
    """
    A 3x3 board stored as 9 cells in row-major order.

    Index map:
        0 | 1 | 2
        3 | 4 | 5
        6 | 7 | 8
    """

    cells: Tuple[Cell, ...] = field(
        default_factory=lambda: (Cell.EMPTY,) * GameConfig.CELL_COUNT
    )

    def __post_init__(self):
        cells = tuple(self.cells)
        if len(cells) != GameConfig.CELL_COUNT:
            raise ValueError(
                f"A board needs {GameConfig.CELL_COUNT} cells, got {len(cells)}"
            )
        for cell in cells:
            if not isinstance(cell, Cell):
                raise ValueError(f"Invalid cell value: {cell!r}")
        # Accept any sequence but always store a tuple
        object.__setattr__(self, "cells", cells)

    @classmethod
    def empty(cls) -> "Board":
        """Create the all-empty starting board."""
        return cls()

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """
        Build a board from 9 characters, e.g. "XO.X.O...".

        "X" and "O" are marks, "." or " " is an empty cell.
        """
        symbols = {"X": Cell.X, "O": Cell.O, ".": Cell.EMPTY, " ": Cell.EMPTY}
        try:
            return cls(tuple(symbols[ch] for ch in text.upper()))
        except KeyError as e:
            raise ValueError(f"Invalid board character: {e.args[0]!r}") from None

    def __getitem__(self, index: int) -> Cell:
        return self.cells[index]

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    def place(self, index: int, mark: Cell) -> "Board":
        """
        Return a new board with one cell set to a mark.

        Args:
            index: Cell index (0-8).
            mark: Cell.X or Cell.O.

        Returns:
            The new board. This board is left untouched.
        """
        if not mark.is_mark:
            raise ValueError("Only X or O can be placed")
        cells = list(self.cells)
        cells[index] = mark
        return Board(tuple(cells))

    def is_empty(self, index: int) -> bool:
        return self.cells[index] == Cell.EMPTY

    def empty_cells(self) -> List[int]:
        """Get the indices of all empty cells."""
        return [i for i, cell in enumerate(self.cells) if cell == Cell.EMPTY]

    def rows(self) -> List[Tuple[Cell, ...]]:
        size = GameConfig.BOARD_SIZE
        return [self.cells[i:i + size] for i in range(0, len(self.cells), size)]

    def mark_count(self, mark: Optional[Cell] = None) -> int:
        """Count placed marks, or only those of one mark."""
        if mark is None:
            return sum(1 for cell in self.cells if cell.is_mark)
        return sum(1 for cell in self.cells if cell == mark)

    def pretty(self) -> str:
        """Text rendering for the console."""
        lines = []
        for row in self.rows():
            lines.append(" " + " | ".join(cell.value or " " for cell in row))
        return "\n---+---+---\n".join(lines)

    def __str__(self) -> str:
        return "".join(cell.value or "." for cell in self.cells)
