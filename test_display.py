"""
Tests for the display module and the console front end.
Tests the board view projection, the board renderer, and command handling.

Usage:
    pytest test_display.py
    python test_display.py      # Run all tests with a summary
"""

import io
import sys
import tempfile
from contextlib import redirect_stdout
from pathlib import Path

import numpy as np

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from display import BoardRenderer, DisplayConfig, render
from logic import GameConfig, GameEngine, MatchState, Player, apply_move, reset
from main import ConsoleGame, parse_cell


def play(moves):
    state = reset()
    for index in moves:
        state = apply_move(state, index).state
    return state


def scripted_input(commands):
    """Input function that replays commands, then signals end of input."""
    commands = iter(commands)

    def read(prompt=""):
        try:
            return next(commands)
        except StopIteration:
            raise EOFError

    return read


# ==================== BOARD VIEW ====================

def test_view_of_new_game():
    view = render(MatchState())

    assert len(view.cells) == 9
    assert all(cell.mark == "" and not cell.disabled for cell in view.cells)
    assert view.cells[0].label == "Row 1, Column 1"
    assert view.cells[5].label == "Row 2, Column 3"
    assert (view.cells[7].row, view.cells[7].col) == (2, 1)
    assert view.status_message == "Player X's turn"
    assert view.current_player == "X"
    assert view.result_text == ""
    assert not view.result_visible
    assert not view.game_over


def test_view_after_move():
    view = render(play([4]))

    assert view.cells[4].mark == "X"
    assert view.cells[4].label == "Row 2, Column 2: X"
    assert view.cells[4].disabled
    assert not view.cells[0].disabled
    assert view.status_message == "Player O's turn"


def test_view_of_won_game():
    view = render(play([0, 3, 1, 4, 2]))

    assert view.game_over
    assert view.winner == "X"
    assert view.winning_cells == [0, 1, 2]
    assert all(cell.disabled for cell in view.cells)
    assert view.status_message == ""
    assert view.result_text == "Player X wins!"
    assert view.result_visible


def test_view_of_draw():
    view = render(play([0, 1, 2, 4, 3, 5, 7, 6, 8]))

    assert view.game_over
    assert view.winner is None
    assert view.winning_cells == []
    assert view.result_text == "It's a draw!"


def test_view_uses_config_texts():
    class ShortTexts(DisplayConfig):
        TURN_TEXT = "{player} to move"

    view = render(MatchState(), ShortTexts())
    assert view.status_message == "X to move"


# ==================== BOARD RENDERER ====================

def test_cell_at_maps_centres_and_edges():
    renderer = BoardRenderer()
    half = renderer.cell_size // 2

    for index in range(9):
        x1, y1, x2, y2 = renderer.cell_bounds(index)
        assert renderer.cell_at(x1 + half, y1 + half) == index
        assert renderer.cell_at(x1, y1) == index
        assert renderer.cell_at(x2 - 1, y2 - 1) == index

    side = renderer.board_pixels
    assert renderer.cell_at(-1, 10) is None
    assert renderer.cell_at(10, side) is None
    assert renderer.cell_at(side, side) is None


def test_draw_returns_board_image():
    config = DisplayConfig()
    renderer = BoardRenderer(config)
    image = renderer.draw(render(MatchState()))

    assert image.shape == (config.BOARD_PIXELS, config.BOARD_PIXELS, 3)
    assert image.dtype == np.uint8
    assert tuple(image[10, 10]) == config.BACKGROUND_COLOR

    rgb = renderer.to_rgb(image)
    assert tuple(rgb[10, 10]) == tuple(reversed(config.BACKGROUND_COLOR))


def test_draw_marks_change_their_cells_only():
    renderer = BoardRenderer()
    empty = renderer.draw(render(MatchState()))
    image = renderer.draw(render(play([4])))

    x1, y1, x2, y2 = renderer.cell_bounds(4)
    assert not np.array_equal(image[y1:y2, x1:x2], empty[y1:y2, x1:x2])

    x1, y1, x2, y2 = renderer.cell_bounds(0)
    assert np.array_equal(image[y1:y2, x1:x2], empty[y1:y2, x1:x2])


def test_draw_highlights_winning_cells():
    config = DisplayConfig()
    renderer = BoardRenderer(config)
    image = renderer.draw(render(play([0, 3, 1, 4, 2])))

    # Corner of a winning cell carries the winner's fill
    x1, y1, _, _ = renderer.cell_bounds(1)
    assert tuple(image[y1 + 10, x1 + 10]) == config.WIN_X_COLOR

    # Other cells are dimmed
    x1, y1, _, _ = renderer.cell_bounds(8)
    background = np.array(config.BACKGROUND_COLOR, dtype=np.float32)
    dimmed = (background * (1.0 - config.GAME_OVER_DIM)).astype(np.uint8)
    assert np.array_equal(image[y1 + 10, x1 + 10], dimmed)


def test_save_writes_image():
    renderer = BoardRenderer()
    with tempfile.TemporaryDirectory() as tmp:
        path = str(Path(tmp) / "board.png")
        assert renderer.save(render(play([4])), path)
        assert Path(path).stat().st_size > 0


# ==================== CONSOLE ====================

def test_parse_cell():
    assert parse_cell("4") == 4
    assert parse_cell(" 8 ") == 8
    assert parse_cell("1,1") == 4
    assert parse_cell("2,0") == 6
    assert parse_cell("3,0") == -1
    for bad in ("x", "1,", "1,2,3", ""):
        try:
            parse_cell(bad)
        except ValueError:
            continue
        raise AssertionError(f"{bad!r} should not parse")


def test_console_plays_a_game():
    engine = GameEngine()
    game = ConsoleGame(engine, input_fn=scripted_input(["0", "3", "0,1", "4", "2", "5"]))
    game.start()

    state = engine.get_state()
    assert state.winner == Player.X
    assert state.winning_line == (0, 1, 2)
    assert state.board[5] is None


def test_console_reports_bad_input_without_crashing():
    engine = GameEngine()
    game = ConsoleGame(engine, input_fn=scripted_input(["9", "-1", "abc", "4", "4", "r", "q", "0"]))
    game.start()

    # Quit stops the loop before the last command
    assert not game.is_running
    assert engine.get_state() == MatchState()


def test_console_save_command():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "snapshot.png"
        game = ConsoleGame(snapshot_path=str(path))
        assert game.handle_command("4")
        assert game.handle_command("s")
        assert path.exists()
        assert not game.handle_command("q")


def test_board_size_follows_cell_size():
    class SmallBoard(DisplayConfig):
        CELL_SIZE_PX = 100

    config = SmallBoard()
    renderer = BoardRenderer(config)
    assert config.BOARD_PIXELS == 300
    assert renderer.board_pixels == 300
    assert renderer.draw(render(MatchState())).shape == (300, 300, 3)
    assert renderer.cell_at(299, 299) == 8
    assert renderer.cell_at(300, 10) is None


def test_console_shows_board_and_result():
    output = io.StringIO()
    with redirect_stdout(output):
        game = ConsoleGame(input_fn=scripted_input(["0", "3", "1", "4", "2"]))
        game.start()

    text = output.getvalue()
    assert " X | X | X" in text
    assert "Player X wins!" in text
    assert "Player O's turn" in text


def test_reset_message_printed_once():
    config = GameConfig()
    config.DEBUG_MODE = True
    output = io.StringIO()
    with redirect_stdout(output):
        game = ConsoleGame(GameEngine(config=config))
        game.handle_command("4")
        game.handle_command("r")

    assert output.getvalue().count("Resetting game...") == 1


# ==================== RUNNER ====================

def run_all_tests(tests=None):
    """Run all tests (or the given (name, func) pairs) and print a summary."""
    print("="*60)
    print("   TicTacToe - Display Tests")
    print("="*60)

    tests = tests or [
        (name, func) for name, func in globals().items()
        if name.startswith("test_") and callable(func)
    ]

    failed = 0
    for name, func in tests:
        try:
            func()
            print(f"  ✓ PASS {name}")
        except Exception as e:
            failed += 1
            print(f"  ✗ FAIL {name}: {e}")

    print("="*60)
    print(f"  Passed: {len(tests) - failed}/{len(tests)}")
    return 0 if failed == 0 else 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
