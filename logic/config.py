"""
Game configuration for the TicTacToe engine.
The board is fixed at 3x3; these values are constants, not options.
"""


class GameConfig:
    """
    Configuration class for game settings.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, cells indexed 0-8 in row-major order
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells

    # ==================== PLAYER SETTINGS ====================
    # X always moves first, after start and after every reset
    FIRST_PLAYER = "X"

    # ==================== DEBUG SETTINGS ====================
    # Print accepted moves, outcomes and resets to the console
    DEBUG_MODE = False
