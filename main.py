"""
Main script for TicTacToe.

Two players share one device and take turns:
- Window mode (default): click the cells
- Console mode (--no-ui): type a cell number or row,col

Run this script to play TicTacToe!
"""

from typing import Optional, Callable

# Logic imports
from logic.config import GameConfig
from logic.game_engine import GameEngine
from logic.game_state import MatchState
from logic.move_validator import InvalidIndexError, MoveStatus

# Display imports
from display.config import DisplayConfig
from display.board_view import render
from display.board_renderer import BoardRenderer


HELP_TEXT = """Commands:
  0-8        play that cell (0 = top-left, 8 = bottom-right)
  row,col    play by coordinates, each 0-2 (e.g. 1,1 for the centre)
  r          restart the game
  s          save a picture of the board
  q          quit"""


def parse_cell(text: str) -> int:
    """
    Parse a cell given as an index ("4") or as row,col ("1,1").

    Range is not checked here; the engine rejects bad indices.

    Raises:
        ValueError: If the text is not a number or a row,col pair.
    """
    text = text.strip()
    if ',' in text:
        row_col = text.split(',')
        if len(row_col) != 2:
            raise ValueError(f"Expected row,col but got {text!r}")
        row, col = int(row_col[0]), int(row_col[1])
        if not (0 <= row < GameConfig.BOARD_SIZE and 0 <= col < GameConfig.BOARD_SIZE):
            # Keep out-of-range coordinates out of the board range too
            return -1
        return row * GameConfig.BOARD_SIZE + col
    return int(text)


class ConsoleGame:
    """
    Console front end for the TicTacToe engine.

    Game flow:
    1. Show the board and whose turn it is
    2. Read a command from the current player
    3. Pass moves to the engine and show the new state
    4. Repeat until someone quits
    """

    def __init__(
        self,
        engine: Optional[GameEngine] = None,
        display_config: Optional[DisplayConfig] = None,
        input_fn: Callable[[str], str] = input,
        snapshot_path: str = "board.png"
    ):
        """
        Initialize the console game.

        Args:
            engine: Game engine. A new match if not provided.
            display_config: Display configuration (texts, image style).
            input_fn: Where commands come from (input() by default).
            snapshot_path: File written by the 's' command.
        """
        self.engine = engine or GameEngine()
        self.display_config = display_config or DisplayConfig()
        self.renderer = BoardRenderer(self.display_config)
        self.input_fn = input_fn
        self.snapshot_path = snapshot_path
        self.is_running = False

        self.engine.subscribe(self._show)

    def start(self):
        """Start the game loop."""
        print("\nStarting TicTacToe game...")
        print(HELP_TEXT)

        self.is_running = True
        self._show(self.engine.get_state())

        while self.is_running:
            try:
                command = self.input_fn("> ")
            except EOFError:
                break
            self.handle_command(command)

    def handle_command(self, command: str) -> bool:
        """
        Handle one line of input.

        Returns:
            False once the player asked to quit, True otherwise.
        """
        command = command.strip().lower()

        if not command:
            return True

        if command in ('q', 'quit', 'exit'):
            self.is_running = False
            return False

        if command in ('r', 'restart', 'reset'):
            self.engine.reset()
            return True

        if command in ('s', 'save'):
            view = render(self.engine.get_state(), self.display_config)
            if self.renderer.save(view, self.snapshot_path):
                print(f"Board saved to {self.snapshot_path}")
            else:
                print(f"!! Could not save board to {self.snapshot_path}")
            return True

        if command in ('h', 'help', '?'):
            print(HELP_TEXT)
            return True

        try:
            index = parse_cell(command)
        except ValueError:
            print("!! Invalid input. Enter a cell 0-8 or row,col (e.g. 1,1).")
            return True

        try:
            self.engine.apply_move(index)
        except InvalidIndexError as e:
            print(f"!! {e}")
            return True

        result = self.engine.last_result
        if result.status == MoveStatus.UNCHANGED:
            print(f"!! {result.message}")

        return True

    def _show(self, state: MatchState):
        """Engine listener: print the board and status."""
        view = render(state, self.display_config)

        print()
        print(state.format_board())
        print()

        if view.result_visible:
            print("="*60)
            print(f"   {view.result_text}")
            print("="*60)
            print("Type 'r' to play again or 'q' to quit.")
        else:
            print(view.status_message)


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe for two players on one device")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print engine and renderer debug output"
    )
    parser.add_argument(
        "--snapshot",
        default="board.png",
        help="File written by the 's' command in console mode"
    )

    args = parser.parse_args(argv)

    # Launch UI by default
    if not args.no_ui:
        from ui import main as ui_main
        ui_main(debug=args.debug)
        return 0

    game_config = GameConfig()
    game_config.DEBUG_MODE = args.debug
    display_config = DisplayConfig()
    display_config.DEBUG_MODE = args.debug

    game = ConsoleGame(
        GameEngine(config=game_config),
        display_config,
        snapshot_path=args.snapshot
    )

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
