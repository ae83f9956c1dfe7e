"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The 3x3 board (click a cell to play it)
- Game status and next player
- A list of every move, click one to go back to it
- A rendered preview of the viewed board
"""

import tkinter as tk
from tkinter import ttk
from PIL import ImageTk
from typing import Optional

from tictactoe import Cell, GameConfig, GameHistory
from display.config import DisplayConfig
from display.board_renderer import BoardRenderer


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    The UI owns one GameHistory and redraws everything from it after
    each click. It keeps no game state of its own.
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        """Initialize the UI."""
        self.config = config or DisplayConfig()
        self.renderer = BoardRenderer(self.config)
        self.history = GameHistory()

        self._create_ui()
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        cfg = self.config

        self.root = tk.Tk()
        self.root.title(cfg.WINDOW_TITLE)
        self.root.configure(bg=cfg.WINDOW_BG)
        self.root.geometry(cfg.WINDOW_SIZE)

        # Main container
        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=cfg.WINDOW_BG)
        style.configure('TLabel', background=cfg.WINDOW_BG, foreground='white', font=cfg.TEXT_FONT)
        style.configure('Title.TLabel', font=cfg.TITLE_FONT, foreground='#00d4ff')
        style.configure('Status.TLabel', font=cfg.STATUS_FONT, foreground='#ffd700')

        # Left panel - Board
        left_frame = ttk.Frame(main_frame)
        left_frame.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=(0, 10))

        ttk.Label(left_frame, text="Game Board", style='Title.TLabel').pack(pady=(0, 10))

        self.status_label = ttk.Label(left_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        board_frame = ttk.Frame(left_frame)
        board_frame.pack(pady=10)

        self.board_cells = []
        for index in range(GameConfig.CELL_COUNT):
            row, col = divmod(index, GameConfig.BOARD_SIZE)
            cell = tk.Button(
                board_frame,
                text="",
                font=cfg.CELL_FONT,
                width=4,
                height=2,
                bg=cfg.CELL_BG,
                fg='white',
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._on_cell_click(i)
            )
            cell.grid(row=row, column=col, padx=2, pady=2)
            self.board_cells.append(cell)

        control_frame = ttk.Frame(left_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="New Game",
            font=cfg.BUTTON_FONT,
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._new_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="Quit",
            font=cfg.TEXT_FONT,
            bg='#ef4444',
            fg='white',
            width=12,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        # Right panel - History
        right_frame = ttk.Frame(main_frame, width=300)
        right_frame.pack(side=tk.RIGHT, fill=tk.Y, padx=(10, 0))
        right_frame.pack_propagate(False)

        ttk.Label(right_frame, text="Preview", style='Title.TLabel').pack()

        self.preview_canvas = tk.Canvas(
            right_frame,
            width=cfg.PREVIEW_SIZE,
            height=cfg.PREVIEW_SIZE,
            bg='#0f0f1a',
            highlightthickness=2,
            highlightbackground='#00d4ff'
        )
        self.preview_canvas.pack(pady=5)

        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=10)
        ttk.Label(right_frame, text="Moves", style='Title.TLabel').pack()

        self.moves_frame = ttk.Frame(right_frame)
        self.moves_frame.pack(fill=tk.BOTH, expand=True, pady=5)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_cell_click(self, index: int):
        """Play a cell. Illegal clicks are ignored."""
        if self.history.play_move(index):
            self._refresh()

    def _on_jump(self, index: int):
        self.history.jump_to(index)
        self._refresh()

    def _new_game(self):
        """Start over with an empty history."""
        print("Starting a new game...")
        self.history = GameHistory()
        self._refresh()

    def _refresh(self):
        """Redraw everything from the history."""
        self._update_board_display()
        self.status_label.configure(text=self.history.status())
        self._update_preview()
        self._update_move_list()

    def _update_board_display(self):
        """Update the board grid display."""
        board = self.history.current_board()
        line = self.history.winning_line() or ()

        for index, cell in enumerate(board):
            button = self.board_cells[index]
            if cell == Cell.X:
                fg = self.config.X_FG
            elif cell == Cell.O:
                fg = self.config.O_FG
            else:
                fg = 'white'
            bg = self.config.CELL_WIN_BG if index in line else self.config.CELL_BG
            button.configure(text=cell.value, fg=fg, bg=bg)

    def _update_preview(self):
        """Draw the rendered board on the preview canvas."""
        size = self.config.PREVIEW_SIZE
        image = self.renderer.to_pil(self.renderer.render_history(self.history))
        photo = ImageTk.PhotoImage(image.resize((size, size)))

        self.preview_canvas.delete("all")
        self.preview_canvas.create_image(0, 0, anchor=tk.NW, image=photo)
        self.preview_canvas.image = photo  # Keep reference

    def _update_move_list(self):
        """Rebuild the jump-to-move buttons."""
        for child in self.moves_frame.winfo_children():
            child.destroy()

        for label, index in self.history.move_descriptors():
            viewed = index == self.history.viewed_index
            tk.Button(
                self.moves_frame,
                text=label,
                font=self.config.MOVE_VIEWED_FONT if viewed else self.config.MOVE_FONT,
                bg='#00d4ff' if viewed else '#2d3748',
                fg='black' if viewed else 'white',
                anchor='w',
                command=lambda i=index: self._on_jump(i)
            ).pack(fill=tk.X, pady=1)

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    print("\n" + "="*60)
    print("   TicTacToe UI")
    print("="*60 + "\n")

    ui = TicTacToeUI()
    ui.run()


if __name__ == "__main__":
    main()
