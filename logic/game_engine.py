"""
Game engine for TicTacToe.
Applies moves to a match state and owns one match per session.
"""

import threading
from typing import Optional, Callable, List
from dataclasses import dataclass

from .config import GameConfig
from .game_state import MatchState
from .move_validator import MoveValidator, MoveStatus, InvalidIndexError
from .win_checker import WinChecker


_validator = MoveValidator()
_win_checker = WinChecker()


@dataclass
class MoveResult:
    """
    Result of applying a move.

    status is APPLIED with the new state, or UNCHANGED / INVALID_INDEX
    with the very state object that was passed in.
    """
    status: MoveStatus
    state: MatchState
    message: Optional[str] = None

    @property
    def applied(self) -> bool:
        return self.status == MoveStatus.APPLIED


def reset() -> MatchState:
    """Create a brand-new match: empty board, X to move, in progress."""
    return MatchState()


def apply_move(state: MatchState, index) -> MoveResult:
    """
    Place the current player's mark at index.

    The input state is never mutated. An accepted move works on a copy:
    the mark is written, the outcome evaluated, and the turn passes to
    the other player only if the match is still in progress.

    Args:
        state: Current match state.
        index: Target cell (0-8).

    Returns:
        MoveResult. Occupied cells and finished matches give UNCHANGED,
        an index outside the board gives INVALID_INDEX.
    """
    validation = _validator.validate_move(state, index)
    if not validation.is_valid:
        return MoveResult(
            status=validation.status,
            state=state,
            message=validation.error_message
        )

    new_state = state.copy()
    new_state.board[index] = new_state.current_player

    # Winner keeps the turn; it stops mattering once the match is over
    if not _win_checker.update_game_state(new_state):
        new_state.current_player = new_state.current_player.opposite()

    return MoveResult(status=MoveStatus.APPLIED, state=new_state)


class GameEngine:
    """
    Owns the state of a single match for one session.

    Every call replaces the state wholesale, and moves are processed
    one at a time. Listeners get the state after each move or reset
    so a view can redraw itself.
    """

    def __init__(
        self,
        state: Optional[MatchState] = None,
        config: Optional[GameConfig] = None
    ):
        """
        Initialize the engine.

        Args:
            state: Starting state. A new match if not provided.
            config: Game configuration.
        """
        self.config = config or GameConfig()
        self._state = state if state is not None else reset()
        self._lock = threading.Lock()
        self._listeners: List[Callable[[MatchState], None]] = []
        self.last_result: Optional[MoveResult] = None

    @property
    def state(self) -> MatchState:
        return self._state

    def get_state(self) -> MatchState:
        """Get the current match state."""
        return self._state

    def subscribe(self, callback: Callable[[MatchState], None]):
        """Call callback(state) after every move and reset."""
        if callback not in self._listeners:
            self._listeners.append(callback)

    def unsubscribe(self, callback: Callable[[MatchState], None]):
        """Stop calling a subscribed callback."""
        if callback in self._listeners:
            self._listeners.remove(callback)

    def apply_move(self, index) -> MatchState:
        """
        Apply a move for the current player.

        Args:
            index: Target cell (0-8).

        Returns:
            The current state after the call. When the move is a no-op this
            is the same object as before.

        Raises:
            InvalidIndexError: If index is not a board cell.
        """
        with self._lock:
            player = self._state.current_player
            result = apply_move(self._state, index)
            self.last_result = result

            if result.status == MoveStatus.INVALID_INDEX:
                raise InvalidIndexError(index)

            self._state = result.state

        if self.config.DEBUG_MODE:
            if result.applied:
                print(f"{player.value} -> cell {index}")
                if self._state.is_game_over:
                    print(f"Game over: {self._state.status.value}")
            else:
                print(f"Move ignored: {result.message}")

        self._notify()
        return self._state

    def reset(self) -> MatchState:
        """Discard the current match and start a new one."""
        with self._lock:
            self._state = reset()
            self.last_result = None

        if self.config.DEBUG_MODE:
            print("Resetting game...")

        self._notify()
        return self._state

    def _notify(self):
        """Pass the current state to every listener."""
        for callback in list(self._listeners):
            callback(self._state)
