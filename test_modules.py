"""
Test script for the TicTacToe logic modules.
Run this directly, or collect it with pytest.
"""

import sys

import numpy as np
import pytest

from tictactoe import (
    Board,
    Cell,
    GameHistory,
    MoveDescriptor,
    MoveValidator,
    WinChecker,
    winner,
    winning_line,
)
from tictactoe.config import GameConfig


def play(history: GameHistory, *cells: int):
    for cell in cells:
        assert history.play_move(cell), f"move at {cell} should be legal"


def test_board():
    """Test the board model."""
    print("\n=== Testing Board ===")
    board = Board.empty()
    assert len(board) == 9
    assert board.empty_cells() == list(range(9))
    assert str(board) == "........."

    after = board.place(4, Cell.X)
    assert board.is_empty(4), "placing must not change the old board"
    assert after[4] == Cell.X
    assert after.mark_count() == 1
    assert after == Board.from_string("....X....")
    assert hash(after) == hash(Board.from_string("....x...."))
    assert after.rows()[1] == (Cell.EMPTY, Cell.X, Cell.EMPTY)

    with pytest.raises(ValueError):
        Board((Cell.EMPTY,) * 8)
    with pytest.raises(ValueError):
        Board(["X"] * 9)
    with pytest.raises(ValueError):
        Board.from_string("XO?......")
    with pytest.raises(ValueError):
        board.place(0, Cell.EMPTY)
    print("  ✓ Board OK")


def test_cell_opposite():
    """Test mark alternation."""
    assert Cell.X.opposite() == Cell.O
    assert Cell.O.opposite() == Cell.X
    with pytest.raises(ValueError):
        Cell.EMPTY.opposite()


def test_empty_board_has_no_winner():
    assert winner(Board.empty()) is None
    assert winning_line(Board.empty()) is None


@pytest.mark.parametrize("mark", [Cell.X, Cell.O])
def test_every_line_wins(mark):
    """Test all 8 lines for both marks."""
    print(f"\n=== Testing Win Lines for {mark} ===")
    for line in GameConfig.WINNING_LINES:
        board = Board.empty()
        for index in line:
            board = board.place(index, mark)
        assert winner(board) == mark, f"line {line} not detected"
        assert winning_line(board) == line
    print("  ✓ Win lines OK")


def test_mixed_line_is_not_a_win():
    board = Board.from_string("XXO......")
    assert winner(board) is None


def test_first_line_in_order_is_reported():
    # Column 0 and the 0-4-8 diagonal both belong to X
    board = Board.from_string("XOOXX.XOX")
    assert WinChecker().get_winning_line(board) == (0, 3, 6)


def test_move_validator():
    """Test move validation messages."""
    print("\n=== Testing Move Validator ===")
    validator = MoveValidator()
    board = Board.empty().place(4, Cell.X)

    assert validator.validate_move(board, 0).is_valid
    assert validator.validate_move(board, np.int64(0)).is_valid

    result = validator.validate_move(board, 4)
    assert not result.is_valid
    assert "occupied by X" in result.error_message

    for bad in (-1, 9, True, "3", 4.0):
        result = validator.validate_move(board, bad)
        assert not result.is_valid
        assert "Must be 0-8" in result.error_message

    won = Board.from_string("XXXOO....")
    result = validator.validate_move(won, 8)
    assert not result.is_valid
    assert "already over" in result.error_message
    assert validator.get_valid_moves(won) == []
    assert validator.get_valid_moves(board) == [0, 1, 2, 3, 5, 6, 7, 8]
    print("  ✓ Move validator OK")


def test_new_history():
    history = GameHistory()
    assert len(history) == 1
    assert history.viewed_index == 0
    assert history.current_board() == Board.empty()
    assert history.next_mark() == Cell.X
    assert history.status() == "Next player: X"
    assert history.move_descriptors() == [MoveDescriptor("Go to game start", 0)]


def test_turns_alternate():
    history = GameHistory()
    for count, cell in enumerate([0, 4, 8, 2, 6], start=1):
        play(history, cell)
        expected = Cell.X if count % 2 == 0 else Cell.O
        assert history.next_mark() == expected
    assert history.current_board() == Board.from_string("X.O.O.X.X")


def test_occupied_cell_is_ignored():
    history = GameHistory()
    play(history, 0)
    assert not history.play_move(0)
    assert len(history) == 2
    assert history.viewed_index == 1
    assert history.next_mark() == Cell.O


def test_out_of_range_cell_is_ignored():
    history = GameHistory()
    assert not history.play_move(9)
    assert not history.play_move(-1)
    assert len(history) == 1


def test_move_after_win_is_ignored():
    history = GameHistory()
    play(history, 0, 3, 1, 4, 2)
    assert history.winner() == Cell.X
    assert history.is_game_over()
    boards = history.boards

    assert not history.play_move(8)
    assert history.boards == boards
    assert history.viewed_index == 5


def test_jump_keeps_history():
    history = GameHistory()
    play(history, 0, 1, 2)
    history.jump_to(1)
    assert len(history) == 4
    assert history.current_board() == Board.from_string("X........")
    assert history.next_mark() == Cell.O
    assert history.status() == "Next player: O"

    history.jump_to(3)
    assert history.current_board() == Board.from_string("XOX......")


def test_jump_out_of_range():
    history = GameHistory()
    play(history, 0)
    with pytest.raises(IndexError):
        history.jump_to(2)
    with pytest.raises(IndexError):
        history.jump_to(-1)
    assert history.viewed_index == 1


@pytest.mark.parametrize("bad", [0.5, 1.0, True, "1", None])
def test_jump_needs_an_integer(bad):
    history = GameHistory()
    play(history, 0)
    with pytest.raises(IndexError):
        history.jump_to(bad)

    # Nothing changed, and the history still works
    assert history.viewed_index == 1
    assert type(history.viewed_index) is int
    assert history.current_board() == Board.from_string("X........")
    assert history.status() == "Next player: O"
    play(history, 4)


def test_numpy_integers_are_accepted():
    history = GameHistory()
    assert history.play_move(np.int64(4))
    assert history.current_board() == Board.from_string("....X....")
    assert not history.play_move(np.int64(4))

    history.jump_to(np.int32(0))
    assert history.viewed_index == 0
    assert type(history.viewed_index) is int


def test_play_from_earlier_board_branches():
    """Test dropping the rest of the history when playing from the past."""
    print("\n=== Testing Branching ===")
    history = GameHistory()
    play(history, 0, 1)
    history.jump_to(0)
    play(history, 4)

    assert len(history) == 2
    assert history.viewed_index == 1
    assert history.current_board() == Board.from_string("....X....")
    assert history.next_mark() == Cell.O
    assert [d.index for d in history.move_descriptors()] == [0, 1]
    print("  ✓ Branching OK")


def test_play_from_middle_keeps_earlier_boards():
    history = GameHistory()
    play(history, 0, 1, 2, 3)
    history.jump_to(2)
    play(history, 8)

    assert len(history) == 4
    assert history.boards[2] == Board.from_string("XO.......")
    assert history.current_board() == Board.from_string("XO......X")


def test_each_board_differs_by_one_mark():
    history = GameHistory()
    play(history, 4, 0, 8, 2)
    history.jump_to(1)
    play(history, 6, 3)

    boards = history.boards
    for index in range(1, len(boards)):
        before, after = boards[index - 1], boards[index]
        changed = [i for i in range(9) if before[i] != after[i]]
        assert len(changed) == 1
        expected = Cell.X if index % 2 == 1 else Cell.O
        assert before[changed[0]] == Cell.EMPTY
        assert after[changed[0]] == expected


def test_move_descriptors():
    history = GameHistory()
    play(history, 0, 1, 2)
    labels = [d.label for d in history.move_descriptors()]
    assert labels == [
        "Go to game start",
        "Go to move #1",
        "Go to move #2",
        "Go to move #3",
    ]
    assert [d.index for d in history.move_descriptors()] == [0, 1, 2, 3]

    # Jumping back does not shorten the list
    history.jump_to(0)
    assert len(history.move_descriptors()) == 4


def test_full_board_without_winner():
    history = GameHistory()
    # X O X / X O O / O X X
    play(history, 0, 1, 2, 4, 3, 5, 7, 6, 8)
    assert len(history) == 10
    assert history.winner() is None
    assert history.current_board().empty_cells() == []
    # Draws are not detected
    assert history.status().startswith("Next player")


def test_end_to_end():
    """Test a full game won by X on the diagonal."""
    print("\n=== Testing Full Game ===")
    history = GameHistory()
    play(history, 0, 1, 4, 2, 8)

    assert history.winner() == Cell.X
    assert history.winning_line() == (0, 4, 8)
    assert history.status() == "Winner: X"

    for cell in range(9):
        assert not history.play_move(cell)
    assert len(history) == 6

    # The board before the winning move is still playable
    history.jump_to(4)
    assert history.status() == "Next player: X"
    assert history.winner() is None
    play(history, 8)
    assert len(history) == 6
    assert history.winner() == Cell.X
    print("  ✓ Full game OK")


def test_o_blocks_the_diagonal():
    # O takes the centre, so X at 0, 1 and 8 is not a line
    history = GameHistory()
    play(history, 0, 4, 1, 3, 8)
    assert history.winner() is None
    assert history.status() == "Next player: O"


def test_o_wins():
    history = GameHistory()
    play(history, 0, 2, 1, 4, 8, 6)
    assert history.winner() == Cell.O
    assert history.status() == "Winner: O"


def run_all_tests():
    """Run all tests."""
    print("="*60)
    print("   TicTacToe - Module Tests")
    print("="*60)

    return pytest.main([__file__, "-q"])


if __name__ == "__main__":
    sys.exit(run_all_tests())
