"""
GameState - self-contained game snapshot.

Optimized for fast copying: the engine copies a state for every move it
explores instead of applying and undoing.
"""

from __future__ import annotations

from typing import Any

import numpy as np


class GameState:
    """
    Lightweight game state container.

    Uses int8 board:
        0 = empty
        1 = player 1's piece
        2 = player 2's piece

    `winner` (0 = none yet) and `last_move` are incidental bookkeeping
    kept on the state so that evaluation never depends on anything
    outside it.
    """
    __slots__ = ('board', 'current_player', 'winner', 'last_move')

    def __init__(
        self,
        board: np.ndarray,
        current_player: int = 1,
        winner: int = 0,
        last_move: Any = None,
    ):
        self.board = board
        self.current_player = current_player
        self.winner = winner
        self.last_move = last_move

    def copy(self) -> "GameState":
        """Fast copy - board.copy() is optimized for contiguous int arrays."""
        return GameState(
            self.board.copy(), self.current_player, self.winner, self.last_move
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return (
            self.current_player == other.current_player
            and self.winner == other.winner
            and self.last_move == other.last_move
            and np.array_equal(self.board, other.board)
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"GameState(board={self.board.tolist()!r}, "
            f"current_player={self.current_player}, winner={self.winner}, "
            f"last_move={self.last_move!r})"
        )
