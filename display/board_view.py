"""
Board view for TicTacToe.
Projects a match state onto everything a front end needs to show:
cell marks, labels, which cells can be clicked, and the status texts.
"""

from typing import Optional, List
from dataclasses import dataclass, field

from logic.game_state import MatchState, GameStatus
from .config import DisplayConfig


@dataclass(frozen=True)
class CellView:
    """How a single cell should be shown."""
    index: int
    row: int
    col: int
    mark: str          # "X", "O" or "" when empty
    label: str         # accessible name, e.g. "Row 1, Column 2: X"
    disabled: bool     # occupied, or the game is over
    winning: bool      # part of the winning line


@dataclass(frozen=True)
class BoardView:
    """
    Everything needed to draw one frame of the game.
    """
    cells: List[CellView] = field(default_factory=list)
    current_player: Optional[str] = None
    winner: Optional[str] = None
    game_over: bool = False
    status_message: str = ""
    result_text: str = ""
    result_visible: bool = False

    @property
    def winning_cells(self) -> List[int]:
        return [cell.index for cell in self.cells if cell.winning]


def render(state: MatchState, config: Optional[DisplayConfig] = None) -> BoardView:
    """
    Project a match state into a BoardView.

    Pure: reads the state and builds a new view, nothing else.

    Args:
        state: The match state to show.
        config: Display configuration (texts and board size).

    Returns:
        The BoardView for this state.
    """
    config = config or DisplayConfig()
    size = config.BOARD_SIZE
    winning_line = state.winning_line or ()
    game_over = state.is_game_over

    cells = []
    for index, mark in enumerate(state.board):
        row, col = divmod(index, size)
        label = config.CELL_LABEL.format(row=row + 1, col=col + 1)
        if mark is not None:
            label = f"{label}: {mark.value}"

        cells.append(CellView(
            index=index,
            row=row,
            col=col,
            mark=mark.value if mark else "",
            label=label,
            disabled=mark is not None or game_over,
            winning=index in winning_line
        ))

    if state.status == GameStatus.WON:
        result_text = config.WIN_TEXT.format(player=state.winner.value)
    elif state.status == GameStatus.DRAW:
        result_text = config.DRAW_TEXT
    else:
        result_text = ""

    # Turn indicator is hidden while the result is shown
    status_message = "" if game_over else config.TURN_TEXT.format(
        player=state.current_player.value
    )

    return BoardView(
        cells=cells,
        current_player=state.current_player.value,
        winner=state.winner.value if state.winner else None,
        game_over=game_over,
        status_message=status_message,
        result_text=result_text,
        result_visible=game_over
    )
