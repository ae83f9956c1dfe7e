"""
Board renderer for TicTacToe.
Draws a board snapshot as a BGR image with OpenCV.
"""

import os
import cv2
import numpy as np
from typing import Optional, Tuple
from PIL import Image

from tictactoe.board import Board, Cell
from tictactoe.config import GameConfig
from tictactoe.game_history import GameHistory
from .config import DisplayConfig


class BoardRenderer:
    """
    Renders boards to images.

    Images are numpy arrays (height, width, 3) in BGR order so they
    can go straight to cv2.imwrite, or through to_pil() into Tkinter.
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: Display configuration. Uses defaults if not provided.
        """
        self.config = config or DisplayConfig()

    def cell_center(self, index: int) -> Tuple[int, int]:
        """Pixel (x, y) of the centre of a cell."""
        cell_size = self.config.CELL_IMAGE_SIZE
        row, col = divmod(index, GameConfig.BOARD_SIZE)
        return (col * cell_size + cell_size // 2, row * cell_size + cell_size // 2)

    def render(
        self,
        board: Board,
        winning_line: Optional[Tuple[int, int, int]] = None
    ) -> np.ndarray:
        """
        Draw a board.

        Args:
            board: The board to draw.
            winning_line: Cells to strike through, if the board is won.

        Returns:
            BGR image of the board.
        """
        size = self.config.CELL_IMAGE_SIZE * GameConfig.BOARD_SIZE
        image = np.full((size, size, 3), self.config.BACKGROUND_COLOR, dtype=np.uint8)

        self._draw_grid(image)

        for index, cell in enumerate(board):
            if cell == Cell.X:
                self._draw_x(image, index)
            elif cell == Cell.O:
                self._draw_o(image, index)
            elif self.config.SHOW_CELL_INDICES:
                self._draw_index(image, index)

        if winning_line is not None:
            start = self.cell_center(winning_line[0])
            end = self.cell_center(winning_line[-1])
            cv2.line(
                image, start, end,
                self.config.WIN_LINE_COLOR,
                self.config.WIN_LINE_THICKNESS
            )

        return image

    def render_history(self, history: GameHistory) -> np.ndarray:
        """Draw the viewed board of a game, with its winning line."""
        return self.render(history.current_board(), history.winning_line())

    def _draw_grid(self, image: np.ndarray):
        size = image.shape[0]
        cell_size = self.config.CELL_IMAGE_SIZE
        color = self.config.GRID_COLOR
        thickness = self.config.GRID_THICKNESS

        for i in range(1, GameConfig.BOARD_SIZE):
            # Vertical lines
            x = i * cell_size
            cv2.line(image, (x, 0), (x, size), color, thickness)
            # Horizontal lines
            y = i * cell_size
            cv2.line(image, (0, y), (size, y), color, thickness)

        # Border
        cv2.rectangle(image, (0, 0), (size - 1, size - 1), color, thickness)

    def _marker_size(self) -> int:
        cell_size = self.config.CELL_IMAGE_SIZE
        margin = int(cell_size * self.config.MARK_MARGIN)
        return cell_size // 2 - margin

    def _draw_x(self, image: np.ndarray, index: int):
        cx, cy = self.cell_center(index)
        s = self._marker_size()
        color = self.config.X_COLOR
        thickness = self.config.MARK_THICKNESS
        cv2.line(image, (cx - s, cy - s), (cx + s, cy + s), color, thickness)
        cv2.line(image, (cx + s, cy - s), (cx - s, cy + s), color, thickness)

    def _draw_o(self, image: np.ndarray, index: int):
        cx, cy = self.cell_center(index)
        cv2.circle(
            image, (cx, cy), self._marker_size(),
            self.config.O_COLOR, self.config.MARK_THICKNESS
        )

    def _draw_index(self, image: np.ndarray, index: int):
        # Small index in the top-left corner of empty cells
        cell_size = self.config.CELL_IMAGE_SIZE
        row, col = divmod(index, GameConfig.BOARD_SIZE)
        cv2.putText(
            image, str(index),
            (col * cell_size + 8, row * cell_size + 18),
            self.config.LABEL_FONT,
            self.config.LABEL_FONT_SCALE,
            self.config.LABEL_COLOR,
            1
        )

    @staticmethod
    def to_pil(image: np.ndarray) -> Image.Image:
        """Convert a BGR image to an RGB Pillow image."""
        return Image.fromarray(cv2.cvtColor(image, cv2.COLOR_BGR2RGB))

    def save(self, image: np.ndarray, path: str) -> bool:
        """
        Write an image to disk.

        Args:
            image: BGR image from render().
            path: Output file, the extension picks the format.

        Returns:
            True if the file was written, False otherwise.
        """
        folder = os.path.dirname(path)
        if folder:
            os.makedirs(folder, exist_ok=True)

        try:
            written = cv2.imwrite(path, image)
        except cv2.error as e:
            # Raised for extensions OpenCV has no writer for
            print(f"ERROR: Could not write image to {path}: {e}")
            return False

        if not written:
            print(f"ERROR: Could not write image to {path}")
            return False

        print(f"Saved: {path}")
        return True
