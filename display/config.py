"""
Display configuration for TicTacToe.
All the settings for drawing the board and the game window.
"""


class DisplayConfig:
    """
    Configuration class for display settings.
    Change these values to restyle the board!
    """

    # ==================== BOARD IMAGE SETTINGS ====================
    BOARD_SIZE = 3
    CELL_SIZE_PX = 160

    LINE_THICKNESS = 4
    MARK_THICKNESS = 12
    MARK_MARGIN_PX = 36  # Gap between a mark and its cell border

    # ==================== COLORS (BGR) ====================
    BACKGROUND_COLOR = (46, 26, 26)
    GRID_COLOR = (94, 65, 45)
    X_COLOR = (248, 189, 56)     # Sky blue
    O_COLOR = (113, 113, 248)    # Soft red
    WIN_X_COLOR = (105, 63, 7)   # Dark blue cell fill
    WIN_O_COLOR = (29, 29, 127)  # Dark red cell fill
    GAME_OVER_DIM = 0.35         # Blend factor toward black on non-winning cells

    # ==================== WINDOW SETTINGS ====================
    WINDOW_TITLE = "TicTacToe"
    WINDOW_BG = '#1a1a2e'
    FONT_FAMILY = 'Segoe UI'
    STATUS_X_FG = '#38bdf8'
    STATUS_O_FG = '#f87171'
    STATUS_IDLE_FG = '#94a3b8'
    RESULT_FG = '#ffd700'

    # ==================== TEXT ====================
    TURN_TEXT = "Player {player}'s turn"
    WIN_TEXT = "Player {player} wins!"
    DRAW_TEXT = "It's a draw!"
    CELL_LABEL = "Row {row}, Column {col}"

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False

    @property
    def BOARD_PIXELS(self) -> int:
        """Side of the square board image, 480 pixels by default."""
        return self.CELL_SIZE_PX * self.BOARD_SIZE
