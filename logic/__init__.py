"""
Logic module for TicTacToe.
Handles game state, rules, and the match engine.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .game_state import GameStatus, MatchState, Player, board_from_string
from .move_validator import InvalidIndexError, MoveStatus, MoveValidator
from .win_checker import WIN_LINES, WinChecker, WinResult
from .game_engine import GameEngine, MoveResult, apply_move, reset
