"""
Game configuration for TicTacToe.
Board geometry, winning lines and the text shown to players.
"""


class GameConfig:
    """
    Configuration class for the game rules and labels.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, cells indexed 0-8 row by row
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE

    # X always opens the game
    FIRST_MARK = "X"

    # All possible winning lines, checked in this order
    WINNING_LINES = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    # ==================== TEXT SETTINGS ====================
    STATUS_WINNER = "Winner: {mark}"
    STATUS_NEXT_PLAYER = "Next player: {mark}"

    # Labels for the jump-to-move list
    START_LABEL = "Go to game start"
    MOVE_LABEL = "Go to move #{index}"
