"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

import numbers
from enum import Enum
from typing import Optional, List
from dataclasses import dataclass
from .config import GameConfig
from .game_state import MatchState


class MoveStatus(Enum):
    """What happened (or would happen) to a move."""
    APPLIED = "applied"
    UNCHANGED = "unchanged"          # occupied cell or finished match
    INVALID_INDEX = "invalid_index"  # caller error, index not in 0-8


class InvalidIndexError(IndexError):
    """Raised when a move targets an index outside the board."""

    def __init__(self, index):
        self.index = index
        super().__init__(
            f"Invalid cell index {index!r}. Must be an int 0-{GameConfig.CELL_COUNT - 1}."
        )


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    status: MoveStatus
    error_message: Optional[str] = None


def is_valid_index(index) -> bool:
    """True for an integer (not a bool) in the board range."""
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        return False
    return 0 <= index < GameConfig.CELL_COUNT


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Index must be a board cell (0-8) - anything else is a caller error
    2. Game must not be over
    3. Can only place on empty cells

    Rules 2 and 3 are guarded no-ops, not errors.
    """

    def validate_move(self, game_state: MatchState, index) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to place the mark (0-8).

        Returns:
            ValidationResult with is_valid, status and error_message.
        """
        # Range first, so a bad index is never hidden behind a no-op
        if not is_valid_index(index):
            return ValidationResult(
                is_valid=False,
                status=MoveStatus.INVALID_INDEX,
                error_message=f"Invalid position {index!r}. Must be 0-{GameConfig.CELL_COUNT - 1}."
            )

        # Check if game is over
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                status=MoveStatus.UNCHANGED,
                error_message="Game is already over!"
            )

        # Check if cell is empty
        occupant = game_state.board[index]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                status=MoveStatus.UNCHANGED,
                error_message=f"Cell {index} is already occupied by {occupant.value}"
            )

        return ValidationResult(is_valid=True, status=MoveStatus.APPLIED)

    def get_valid_moves(self, game_state: MatchState) -> List[int]:
        """
        Get all valid moves for the current player.

        Returns:
            List of cell indices, empty once the game is over.
        """
        if game_state.is_game_over:
            return []

        return game_state.get_empty_cells()
