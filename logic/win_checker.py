"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, List, Tuple, Sequence
from dataclasses import dataclass
from .game_state import MatchState, Player, GameStatus


# All possible winning lines as board indices.
# Catalog order matters: the first completed line wins.
WIN_LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


@dataclass(frozen=True)
class WinResult:
    """A completed line and the player who owns it."""
    winner: Player
    line: Tuple[int, int, int]


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)

    All checks are pure and work on a bare board, so they can be
    used on any 9-cell snapshot, not only on boards reached by play.
    """

    WINNING_LINES = WIN_LINES

    def check_winner(self, board: Sequence[Optional[Player]]) -> Optional[WinResult]:
        """
        Check if there's a winner.

        Lines are scanned in catalog order; on a board with more than one
        completed line the earliest line in WIN_LINES is returned.

        Args:
            board: 9-cell board.

        Returns:
            WinResult with the winner and line, or None if no winner.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return WinResult(winner=winner, line=line)

        return None

    def _check_line(
        self,
        board: Sequence[Optional[Player]],
        line: Tuple[int, int, int]
    ) -> Optional[Player]:
        """
        Check if a single line has a winner.

        Returns:
            The winning Player if all 3 cells hold the same mark, None otherwise.
        """
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return board[a]
        return None

    def check_draw(self, board: Sequence[Optional[Player]]) -> bool:
        """
        Check if the board is a draw.

        A draw occurs when all cells are filled AND there is no winner.
        A full board that also has a winning line is not a draw.
        """
        # First check if there's a winner - if so, not a draw
        if self.check_winner(board) is not None:
            return False

        return all(cell is not None for cell in board)

    def get_winning_line(self, board: Sequence[Optional[Player]]) -> Optional[Tuple[int, int, int]]:
        """Get the winning line if there is one."""
        result = self.check_winner(board)
        return result.line if result else None

    def get_completed_lines(self, board: Sequence[Optional[Player]]) -> List[WinResult]:
        """
        Get every completed line, in catalog order.
        Only contrived boards can have more than one.
        """
        results = []
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                results.append(WinResult(winner=winner, line=line))
        return results

    def update_game_state(self, game_state: MatchState) -> bool:
        """
        Record the outcome of the board in the game state.

        Args:
            game_state: The state to update (mutated in place).

        Returns:
            True if the match is now over.
        """
        result = self.check_winner(game_state.board)

        if result is not None:
            game_state.status = GameStatus.WON
            game_state.winner = result.winner
            game_state.winning_line = result.line
            return True

        if self.check_draw(game_state.board):
            game_state.status = GameStatus.DRAW
            game_state.winner = None
            game_state.winning_line = None
            return True

        return False


# Quick test
if __name__ == "__main__":
    from .game_state import board_from_string

    print("Testing WinChecker...")

    checker = WinChecker()

    # Test 1: Horizontal win
    result = checker.check_winner(board_from_string("XXX" "OO." "..."))
    print(f"Test 1 (horizontal): {result}")
    assert result == WinResult(Player.X, (0, 1, 2))

    # Test 2: Two lines at once - catalog order decides
    result = checker.check_winner(board_from_string("OOO" "XXX" "..."))
    print(f"Test 2 (two lines): {result}")
    assert result.line == (0, 1, 2)

    # Test 3: Draw (full board, no winner)
    is_draw = checker.check_draw(board_from_string("XOX" "XOO" "OXX"))
    print(f"Test 3 (draw): is_draw = {is_draw}")
    assert is_draw

    print("\nWinChecker test done!")
