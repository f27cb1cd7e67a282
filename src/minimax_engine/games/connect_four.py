"""
Connect Four game logic.

Board encoding (int8), row 0 is the top:
    0 = empty
    1 = player 1 (X)
    2 = player 2 (O)

A move is a column index; the piece drops to the lowest empty row.
Columns are enumerated centre-first, which is the order ties resolve in.
"""

from __future__ import annotations

import numpy as np

from minimax_engine.core.types import DRAW_SCORE, WIN_SCORE, MoveBuffer
from minimax_engine.games.game_logic import GameLogic
from minimax_engine.games.game_rules import board_full, has_line, line_counts, line_indices
from minimax_engine.games.game_state import GameState

CELL_STRINGS = {0: ".", 1: "X", 2: "O"}

ROWS = 6
COLS = 7
CONNECT = 4

COLUMN_ORDER = (3, 2, 4, 1, 5, 0, 6)
CENTER_COL = COLS // 2

# Window weights
THREE_OPEN = 5
TWO_OPEN = 2
CENTER_PIECE = 3

_WINDOWS = line_indices(ROWS, COLS, CONNECT)


class ConnectFour(GameLogic):
    """Connect Four on the standard 6x7 board."""

    __slots__ = ('maximizing_player',)

    MAX_MOVES = COLS

    def __init__(self, maximizing_player: int = 1):
        if maximizing_player not in (1, 2):
            raise ValueError(f"maximizing_player must be 1 or 2, got {maximizing_player}")
        self.maximizing_player = maximizing_player

    def game_id(self) -> str:
        return "connect_four"

    def initial_state(self) -> GameState:
        return GameState(np.zeros((ROWS, COLS), dtype=np.int8), current_player=1)

    # ------------------------------------------------------------------
    # Engine contract
    # ------------------------------------------------------------------

    def evaluate(self, state: GameState) -> int:
        me = self.maximizing_player
        if state.winner == me:
            return WIN_SCORE
        if state.winner != 0:
            return -WIN_SCORE
        if board_full(state.board):
            return DRAW_SCORE
        return self._side_score(state.board, me) - self._side_score(state.board, 3 - me)

    @staticmethod
    def _side_score(board: np.ndarray, player: int) -> int:
        own = line_counts(board, _WINDOWS, player)
        empty = line_counts(board, _WINDOWS, 0)
        score = THREE_OPEN * np.count_nonzero((own == 3) & (empty == 1))
        score += TWO_OPEN * np.count_nonzero((own == 2) & (empty == 2))
        score += CENTER_PIECE * np.count_nonzero(board[:, CENTER_COL] == player)
        return int(score)

    def generate_moves(self, state: GameState, moves: MoveBuffer, max_moves: int) -> int:
        top = state.board[0]
        count = 0
        for col in COLUMN_ORDER:
            if count >= max_moves:
                break
            if top[col] == 0:
                moves[count] = col
                count += 1
        return count

    def apply_move(self, state: GameState, move: int) -> None:
        col = int(move)
        if not 0 <= col < COLS:
            raise ValueError(f"Column {col} is off the board")

        empty_rows = np.flatnonzero(state.board[:, col] == 0)
        if empty_rows.size == 0:
            raise ValueError(f"Column {col} is full")
        row = int(empty_rows[-1])

        player = state.current_player
        state.board[row, col] = player
        state.last_move = (row, col)
        if has_line(state.board, _WINDOWS, player):
            state.winner = player

        state.current_player = 3 - player

    def is_terminal(self, state: GameState) -> bool:
        return state.winner != 0 or not np.any(state.board[0] == 0)

    def is_maximizing_player(self, state: GameState) -> bool:
        return state.current_player == self.maximizing_player

    # ------------------------------------------------------------------
    # Host helpers
    # ------------------------------------------------------------------

    def parse_move(self, text: str) -> int:
        """Parse a 0-based column index."""
        return int(text.strip())

    def state_string(self, state: GameState) -> str:
        lines = [" ".join(str(c) for c in range(COLS))]
        for r in range(ROWS):
            lines.append(" ".join(CELL_STRINGS[int(v)] for v in state.board[r]))
        return "\n".join(lines)
