"""
Game state management for TicTacToe.
Tracks the board, current player, and match outcome.
"""

from enum import Enum
from typing import Optional, List, Tuple, Dict, Any
from dataclasses import dataclass, field

from .config import GameConfig


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


class GameStatus(Enum):
    """Outcome of a match."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


# Characters accepted as an empty cell by board_from_string
EMPTY_CHARS = ".-_ "
IGNORED_CHARS = "|\n\r\t"


def empty_board() -> List[Optional[Player]]:
    """Return a fresh board with all 9 cells empty."""
    return [None] * GameConfig.CELL_COUNT


def board_from_string(text: str) -> List[Optional[Player]]:
    """
    Build a board from a compact text picture.

    Example:
        board_from_string("XXX"
                          "OO."
                          "...")

    Args:
        text: 9 cell characters in row-major order. X and O are marks,
              '.', '-', '_' or a space are empty. Newlines and '|' are skipped.

    Returns:
        A 9-cell board.

    Raises:
        ValueError: If a character is unknown or the cell count is not 9.
    """
    board: List[Optional[Player]] = []
    for char in text:
        if char in IGNORED_CHARS:
            continue
        if char in EMPTY_CHARS:
            board.append(None)
        elif char.upper() in ("X", "O"):
            board.append(Player(char.upper()))
        else:
            raise ValueError(f"Invalid cell character {char!r}")

    if len(board) != GameConfig.CELL_COUNT:
        raise ValueError(
            f"Board needs {GameConfig.CELL_COUNT} cells, got {len(board)}"
        )
    return board


@dataclass
class MatchState:
    """
    The complete state of one TicTacToe match.

    Tracks:
    - The 9-cell board (index = row * 3 + col)
    - Current player
    - Match outcome (in progress, won with a line, or draw)

    MatchState() is always a brand-new match: empty board, X to move.
    """

    # The board - None means empty, otherwise the player's mark
    board: List[Optional[Player]] = field(default_factory=empty_board)

    # Current player's turn
    current_player: Player = field(default_factory=lambda: Player(GameConfig.FIRST_PLAYER))

    # Match result
    status: GameStatus = GameStatus.IN_PROGRESS
    winner: Optional[Player] = None
    winning_line: Optional[Tuple[int, int, int]] = None

    @property
    def is_game_over(self) -> bool:
        """True once the match is won or drawn."""
        return self.status != GameStatus.IN_PROGRESS

    def is_full(self) -> bool:
        """True if every cell holds a mark."""
        return all(cell is not None for cell in self.board)

    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            List of cell indices, in ascending order.
        """
        return [index for index, cell in enumerate(self.board) if cell is None]

    def copy(self) -> "MatchState":
        """Create a deep copy of the match state."""
        return MatchState(
            board=list(self.board),
            current_player=self.current_player,
            status=self.status,
            winner=self.winner,
            winning_line=self.winning_line
        )

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data snapshot with symbols as strings."""
        return {
            "board": [cell.value if cell else None for cell in self.board],
            "current_player": self.current_player.value,
            "status": self.status.value,
            "winner": self.winner.value if self.winner else None,
            "winning_line": list(self.winning_line) if self.winning_line else None,
        }

    def format_board(self) -> str:
        """
        Text picture of the board. Empty cells show their index.
        """
        size = GameConfig.BOARD_SIZE
        rows = []
        for row in range(size):
            cells = []
            for col in range(size):
                index = row * size + col
                mark = self.board[index]
                cells.append(mark.value if mark else str(index))
            rows.append(" " + " | ".join(cells))

        separator = "\n" + "-" * (size * 4 - 1) + "\n"
        return separator.join(rows)
