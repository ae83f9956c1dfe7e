"""
Display configuration for TicTacToe.
All the settings for board images and the Tkinter window.
"""

import cv2

from tictactoe.config import GameConfig


class DisplayConfig:
    """
    Configuration class for display settings.
    Colours are BGR, as OpenCV expects.
    """

    # ==================== IMAGE SETTINGS ====================
    # Output size for a rendered board (pixels, square)
    BOARD_IMAGE_SIZE = 300
    CELL_IMAGE_SIZE = BOARD_IMAGE_SIZE // GameConfig.BOARD_SIZE  # 100 pixels per cell

    BACKGROUND_COLOR = (255, 255, 255)
    GRID_COLOR = (0, 0, 0)
    GRID_THICKNESS = 3

    X_COLOR = (255, 0, 0)      # Blue
    O_COLOR = (0, 0, 255)      # Red
    MARK_THICKNESS = 8
    # Gap between a mark and the cell border, as a fraction of the cell
    MARK_MARGIN = 0.2

    WIN_LINE_COLOR = (0, 200, 0)  # Green
    WIN_LINE_THICKNESS = 6

    LABEL_FONT = cv2.FONT_HERSHEY_SIMPLEX
    LABEL_FONT_SCALE = 0.4
    LABEL_COLOR = (150, 150, 150)
    SHOW_CELL_INDICES = True

    # ==================== SNAPSHOT SETTINGS ====================
    SNAPSHOT_DIR = "snapshots"
    SNAPSHOT_NAME = "tictactoe_move{index}_{timestamp}.png"

    # ==================== WINDOW SETTINGS ====================
    WINDOW_TITLE = "TicTacToe"
    WINDOW_SIZE = "760x520"
    WINDOW_BG = "#1a1a2e"
    CELL_BG = "#16213e"
    CELL_WIN_BG = "#065f46"
    CELL_FONT = ("Segoe UI", 24, "bold")
    TITLE_FONT = ("Segoe UI", 16, "bold")
    TEXT_FONT = ("Segoe UI", 11)
    STATUS_FONT = ("Segoe UI", 12)
    BUTTON_FONT = ("Segoe UI", 11, "bold")
    MOVE_FONT = ("Segoe UI", 10, "normal")
    MOVE_VIEWED_FONT = ("Segoe UI", 10, "bold")
    X_FG = "#60a5fa"
    O_FG = "#f87171"
    PREVIEW_SIZE = 180
