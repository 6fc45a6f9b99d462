"""
Display module for TicTacToe.
Turns match state into something a player can see.
"""

from .config import DisplayConfig
from .board_view import BoardView, CellView, render
from .board_renderer import BoardRenderer
