"""
Main entry point for TicTacToe.

Launches the Tkinter UI by default, or a console game with --no-ui.

Console commands:
    0-8          play the cell
    j N          jump to move N (also: jump N)
    m            show the move list (also: moves)
    n            start a new game (also: new)
    s [PATH]     save the viewed board as an image (also: save)
    h            show help (also: help)
    q            quit (also: quit)
"""

import logging
import os
import time
from typing import List, Optional

from tictactoe import GameHistory
from display.config import DisplayConfig
from display.board_renderer import BoardRenderer


HELP_TEXT = """Commands:
  0-8        play the cell
  j N        jump to move N
  m          show the move list
  n          start a new game
  s [PATH]   save the viewed board as an image
  h          show this help
  q          quit"""


def _is_number(text: str) -> bool:
    # isdigit() also accepts "²", which int() rejects
    return text.isascii() and text.isdecimal()


class TicTacToeConsole:
    """
    Console game for two players sharing one keyboard.

    Each command is handled by handle_command(), which returns False
    once the player asks to quit.
    """

    def __init__(
        self,
        snapshot_dir: Optional[str] = None,
        config: Optional[DisplayConfig] = None
    ):
        self.config = config or DisplayConfig()
        self.snapshot_dir = snapshot_dir or self.config.SNAPSHOT_DIR
        self.renderer = BoardRenderer(self.config)
        self.history = GameHistory()

    def show(self):
        """Print the viewed board and the status line."""
        print()
        print(self.history.current_board().pretty())
        print(f"\n{self.history.status()}  (viewing move #{self.history.viewed_index})")

    def show_moves(self):
        """Print the jump-to-move list, marking the viewed entry."""
        for label, index in self.history.move_descriptors():
            marker = ">" if index == self.history.viewed_index else " "
            print(f" {marker} [{index}] {label}")

    def snapshot_path(self) -> str:
        name = self.config.SNAPSHOT_NAME.format(
            index=self.history.viewed_index,
            timestamp=int(time.time())
        )
        return os.path.join(self.snapshot_dir, name)

    def save_snapshot(self, path: Optional[str] = None) -> bool:
        image = self.renderer.render_history(self.history)
        return self.renderer.save(image, path or self.snapshot_path())

    def handle_command(self, line: str) -> bool:
        """
        Handle one line of input.

        Args:
            line: The text typed by the player.

        Returns:
            False if the game should stop, True otherwise.
        """
        parts: List[str] = line.strip().split()
        if not parts:
            return True

        command, args = parts[0].lower(), parts[1:]

        if _is_number(command) and not args:
            if not self.history.play_move(int(command)):
                print(f"Illegal move at {command}. Try again.")
            self.show()
        elif command in ("j", "jump"):
            self._jump(args)
        elif command in ("m", "moves"):
            self.show_moves()
        elif command in ("n", "new"):
            print("\nStarting a new game...")
            self.history = GameHistory()
            self.show()
        elif command in ("s", "save"):
            self.save_snapshot(args[0] if args else None)
        elif command in ("h", "help"):
            print(HELP_TEXT)
        elif command in ("q", "quit"):
            return False
        else:
            print(f"Unknown command: {line.strip()!r}. Type 'h' for help.")

        return True

    def _jump(self, args: List[str]):
        if len(args) != 1 or not _is_number(args[0]):
            print("Usage: j N")
            return
        try:
            self.history.jump_to(int(args[0]))
        except IndexError as e:
            print(f"ERROR: {e}")
            return
        self.show()

    def run(self):
        """Read commands until the player quits."""
        print("\n" + "="*40)
        print("   TicTacToe")
        print("="*40)
        print("Index map:\n 0 | 1 | 2\n 3 | 4 | 5\n 6 | 7 | 8")
        print(HELP_TEXT)
        self.show()

        while True:
            try:
                line = input("> ")
            except EOFError:
                break
            if not self.handle_command(line):
                break


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe with move history")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--snapshot-dir",
        type=str,
        default=None,
        help="Folder for boards saved from the console"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every move and jump"
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s: %(message)s"
        )

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI()
        ui.run()
        return

    console = TicTacToeConsole(snapshot_dir=args.snapshot_dir)
    try:
        console.run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
