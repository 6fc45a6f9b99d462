"""
Board renderer for TicTacToe.
Draws a BoardView into an image with OpenCV and maps clicks back to cells.
"""

import cv2
import numpy as np
from typing import Optional, Tuple
from .config import DisplayConfig
from .board_view import BoardView


class BoardRenderer:
    """
    Draws the 3x3 board as a square BGR image.

    - Grid lines between cells
    - X as two crossed strokes, O as a ring
    - Winning cells filled with the winner's colour
    - Other cells dimmed once the game is over
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: Display configuration.
        """
        self.config = config or DisplayConfig()
        self.cell_size = self.config.CELL_SIZE_PX
        self.board_pixels = self.config.BOARD_PIXELS

        if self.config.DEBUG_MODE:
            print(f"BoardRenderer initialized! ({self.board_pixels}x{self.board_pixels})")

    def cell_bounds(self, index: int) -> Tuple[int, int, int, int]:
        """
        Get the pixel rectangle of a cell.

        Args:
            index: Cell index (0-8).

        Returns:
            (x1, y1, x2, y2) with x2/y2 exclusive.
        """
        row, col = divmod(index, self.config.BOARD_SIZE)
        x1 = col * self.cell_size
        y1 = row * self.cell_size
        return x1, y1, x1 + self.cell_size, y1 + self.cell_size

    def cell_at(self, x: float, y: float) -> Optional[int]:
        """
        Find the cell under a pixel.

        Args:
            x: Pixel X in board image coordinates.
            y: Pixel Y in board image coordinates.

        Returns:
            Cell index (0-8), or None if the point is off the board.
        """
        if not (0 <= x < self.board_pixels and 0 <= y < self.board_pixels):
            return None

        col = int(x // self.cell_size)
        row = int(y // self.cell_size)
        return row * self.config.BOARD_SIZE + col

    def draw(self, view: BoardView) -> np.ndarray:
        """
        Draw the board.

        Args:
            view: The BoardView to draw.

        Returns:
            BGR image of shape (BOARD_PIXELS, BOARD_PIXELS, 3).
        """
        size = self.board_pixels
        image = np.full((size, size, 3), self.config.BACKGROUND_COLOR, dtype=np.uint8)

        win_color = self.config.WIN_X_COLOR if view.winner == "X" else self.config.WIN_O_COLOR

        for cell in view.cells:
            x1, y1, x2, y2 = self.cell_bounds(cell.index)

            if cell.winning:
                cv2.rectangle(image, (x1, y1), (x2 - 1, y2 - 1), win_color, -1)

            if cell.mark == "X":
                self._draw_x(image, x1, y1)
            elif cell.mark == "O":
                self._draw_o(image, x1, y1)

            # Fade everything that is not part of the result
            if view.game_over and not cell.winning:
                region = image[y1:y2, x1:x2].astype(np.float32)
                image[y1:y2, x1:x2] = (region * (1.0 - self.config.GAME_OVER_DIM)).astype(np.uint8)

        self._draw_grid(image)
        return image

    def to_rgb(self, image: np.ndarray) -> np.ndarray:
        """Convert a drawn BGR image to RGB (for PIL)."""
        return cv2.cvtColor(image, cv2.COLOR_BGR2RGB)

    def save(self, view: BoardView, path: str) -> bool:
        """
        Draw the board and write it to an image file.

        Returns:
            True if the file was written.
        """
        saved = cv2.imwrite(path, self.draw(view))
        if self.config.DEBUG_MODE:
            print(f"Saved board image to {path}: {saved}")
        return saved

    def _draw_grid(self, image: np.ndarray):
        """Draw the inner grid lines."""
        size = self.board_pixels
        for i in range(1, self.config.BOARD_SIZE):
            offset = i * self.cell_size
            # Vertical line
            cv2.line(image, (offset, 0), (offset, size), self.config.GRID_COLOR,
                     self.config.LINE_THICKNESS)
            # Horizontal line
            cv2.line(image, (0, offset), (size, offset), self.config.GRID_COLOR,
                     self.config.LINE_THICKNESS)

    def _draw_x(self, image: np.ndarray, x1: int, y1: int):
        """Draw an X inside the cell starting at (x1, y1)."""
        margin = self.config.MARK_MARGIN_PX
        far = self.cell_size - margin
        cv2.line(image, (x1 + margin, y1 + margin), (x1 + far, y1 + far),
                 self.config.X_COLOR, self.config.MARK_THICKNESS, cv2.LINE_AA)
        cv2.line(image, (x1 + far, y1 + margin), (x1 + margin, y1 + far),
                 self.config.X_COLOR, self.config.MARK_THICKNESS, cv2.LINE_AA)

    def _draw_o(self, image: np.ndarray, x1: int, y1: int):
        """Draw an O inside the cell starting at (x1, y1)."""
        center = (x1 + self.cell_size // 2, y1 + self.cell_size // 2)
        radius = self.cell_size // 2 - self.config.MARK_MARGIN_PX
        cv2.circle(image, center, radius, self.config.O_COLOR,
                   self.config.MARK_THICKNESS, cv2.LINE_AA)
