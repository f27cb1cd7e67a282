"""
GameLogic - the capability contract every game implements for the engine.
"""

from abc import ABC, abstractmethod
from typing import Any

from minimax_engine.core.types import MoveBuffer
from minimax_engine.games.game_state import GameState


class GameLogic(ABC):
    """
    Abstract base class for games searchable by Minimax.

    IMPORTANT CONTRACT NOTES:
    -------------------------
    - evaluate() scores from the MAXIMIZING side's point of view, always,
      whoever is to move. Values must lie strictly inside
      (SCORE_MIN, SCORE_MAX).
    - is_terminal() must be True whenever generate_moves() would return 0.
      Otherwise the engine sees an empty node and returns a sentinel.
    - generate_moves() order decides ties: the first best move wins.
    - apply_move() is a pure function of (state, move). No globals.

    The engine does not validate any of this unless asked to
    (check_contracts=True).
    """

    # Worst-case branching factor; used to size the engine's move buffers.
    MAX_MOVES = 64

    # ------------------------------------------------------------------
    # Engine contract
    # ------------------------------------------------------------------

    @abstractmethod
    def evaluate(self, state: GameState) -> int:
        """Heuristic or terminal value of state."""
        pass

    @abstractmethod
    def generate_moves(self, state: GameState, moves: MoveBuffer, max_moves: int) -> int:
        """
        Write the legal moves for the player to move into `moves`.

        Writes at most `max_moves` entries starting at index 0.

        Returns:
            Number of moves written.
        """
        pass

    @abstractmethod
    def apply_move(self, state: GameState, move: Any) -> None:
        """Apply move to state in place, including switching the turn."""
        pass

    @abstractmethod
    def is_terminal(self, state: GameState) -> bool:
        """Return True if the game is over (win, loss, draw or stalemate)."""
        pass

    @abstractmethod
    def is_maximizing_player(self, state: GameState) -> bool:
        """Return True if the player to move is the maximizing side."""
        pass

    # ------------------------------------------------------------------
    # Host helpers (play loop / CLI)
    #
    # Optional: the engine never calls these. initial_state() and
    # parse_move() have no sensible default and raise NotImplementedError
    # until a game that is played interactively overrides them.
    # ------------------------------------------------------------------

    def game_id(self) -> str:
        """Return a stable identifier (e.g. 'tic_tac_toe')."""
        return type(self).__name__.lower()

    def initial_state(self) -> GameState:
        """Return the starting position."""
        raise NotImplementedError(f"{type(self).__name__} does not define a starting position")

    def state_string(self, state: GameState) -> str:
        """Pretty string representation of the state."""
        return repr(state)

    def parse_move(self, text: str) -> Any:
        """Parse human input into a move. Raises ValueError on bad input."""
        raise NotImplementedError(f"{type(self).__name__} does not accept typed moves")

    def format_move(self, move: Any) -> str:
        return str(move)

    def legal_moves(self, state: GameState) -> list:
        """Convenience: legal moves as a list (allocates, not for search)."""
        buffer = MoveBuffer(self.MAX_MOVES)
        buffer.count = self.generate_moves(state, buffer, buffer.capacity)
        return list(buffer)
