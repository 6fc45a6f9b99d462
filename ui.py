"""
TicTacToe UI
A graphical interface for two players sharing one screen, using Tkinter.

Shows:
- The board (click a cell to play it)
- Whose turn it is
- The result once the game is won or drawn
- A restart button
"""

import tkinter as tk
from tkinter import ttk
from PIL import Image, ImageTk
from typing import Optional

# Logic imports
from logic.config import GameConfig
from logic.game_engine import GameEngine
from logic.game_state import MatchState

# Display imports
from display.config import DisplayConfig
from display.board_view import BoardView, render
from display.board_renderer import BoardRenderer


class TicTacToeUI:
    """
    Main UI class for the TicTacToe game.

    The window never changes the game itself: clicks go to the engine,
    and the engine calls back with the new state to be drawn.
    """

    def __init__(
        self,
        engine: Optional[GameEngine] = None,
        config: Optional[DisplayConfig] = None
    ):
        """Initialize the UI."""
        self.config = config or DisplayConfig()
        self.engine = engine or GameEngine()
        self.renderer = BoardRenderer(self.config)
        self.view: Optional[BoardView] = None

        # Canvas placement of the board image (updated on every draw)
        self._board_offset = (0, 0)
        self._board_scale = 1.0

        self._create_ui()
        self.engine.subscribe(self._on_state_changed)

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(self.config.WINDOW_TITLE)
        self.root.configure(bg=self.config.WINDOW_BG)

        side = self.renderer.board_pixels
        self.root.geometry(f"{side + 40}x{side + 180}")
        self.root.minsize(side // 2 + 40, side // 2 + 180)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        font = self.config.FONT_FAMILY
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=self.config.WINDOW_BG)
        style.configure('TLabel', background=self.config.WINDOW_BG, foreground='white', font=(font, 11))
        style.configure('Status.TLabel', font=(font, 14, 'bold'))
        style.configure('Result.TLabel', font=(font, 16, 'bold'), foreground=self.config.RESULT_FG)

        # Turn indicator
        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=(0, 10))

        # Board canvas
        self.board_canvas = tk.Canvas(main_frame, bg=self.config.WINDOW_BG, highlightthickness=0)
        self.board_canvas.pack(fill=tk.BOTH, expand=True)
        self.board_canvas.bind("<Button-1>", self._on_canvas_click)
        self.board_canvas.bind("<Configure>", lambda event: self._draw_board())

        # Result banner (hidden while the game is running)
        self.result_label = ttk.Label(main_frame, text="", style='Result.TLabel')

        # Restart button
        self.reset_btn = tk.Button(
            main_frame,
            text="🔄 Restart",
            font=(font, 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._reset_game
        )
        self.reset_btn.pack(side=tk.BOTTOM, pady=10)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_state_changed(self, state: MatchState):
        """Engine listener: redraw everything from the new state."""
        self.view = render(state, self.config)
        self._draw_board()
        self._update_game_info()

    def _on_canvas_click(self, event):
        """Translate a click into a cell and play it."""
        if self.view is None or self.view.game_over:
            return

        offset_x, offset_y = self._board_offset
        x = (event.x - offset_x) / self._board_scale
        y = (event.y - offset_y) / self._board_scale

        index = self.renderer.cell_at(x, y)
        if index is None or self.view.cells[index].disabled:
            return

        self.engine.apply_move(index)

    def _draw_board(self):
        """Draw the current view onto the canvas, centred and scaled to fit."""
        if self.view is None:
            return

        canvas_width = self.board_canvas.winfo_width()
        canvas_height = self.board_canvas.winfo_height()

        if canvas_width < 10 or canvas_height < 10:
            return

        frame = self.renderer.draw(self.view)

        # Resize board to fit canvas
        side = frame.shape[0]
        scale = min(canvas_width / side, canvas_height / side)
        new_side = max(int(side * scale), 1)

        image = Image.fromarray(self.renderer.to_rgb(frame))
        image = image.resize((new_side, new_side), Image.LANCZOS)
        photo = ImageTk.PhotoImage(image)

        x = (canvas_width - new_side) // 2
        y = (canvas_height - new_side) // 2
        self._board_offset = (x, y)
        self._board_scale = new_side / side

        self.board_canvas.delete("all")
        self.board_canvas.create_image(x, y, anchor=tk.NW, image=photo)
        self.board_canvas.image = photo  # Keep reference

    def _update_game_info(self):
        """Update turn and result labels."""
        view = self.view

        if view.game_over:
            self.status_label.configure(text="", foreground=self.config.STATUS_IDLE_FG)
            self.result_label.configure(text=view.result_text)
            if not self.result_label.winfo_ismapped():
                self.result_label.pack(before=self.reset_btn, pady=5)
        else:
            color = self.config.STATUS_X_FG if view.current_player == "X" else self.config.STATUS_O_FG
            self.status_label.configure(text=view.status_message, foreground=color)
            self.result_label.configure(text="")
            self.result_label.pack_forget()

    def _reset_game(self):
        """Reset the game."""
        self.engine.reset()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.engine.unsubscribe(self._on_state_changed)
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self._on_state_changed(self.engine.get_state())
        self.root.mainloop()


def main(debug: bool = False):
    """Main entry point."""
    game_config = GameConfig()
    game_config.DEBUG_MODE = debug

    display_config = DisplayConfig()
    display_config.DEBUG_MODE = debug

    print("\n" + "="*60)
    print("   TicTacToe")
    print("="*60 + "\n")

    ui = TicTacToeUI(GameEngine(config=game_config), display_config)
    ui.run()


if __name__ == "__main__":
    main()
