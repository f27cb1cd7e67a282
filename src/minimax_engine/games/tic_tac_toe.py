"""
TicTacToe game logic.

Uses int8 board:
    0 = empty
    1 = player 1 (X)
    2 = player 2 (O)

Moves are (row, col) tuples, enumerated row-major over empty cells.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from minimax_engine.core.types import DRAW_SCORE, WIN_SCORE, MoveBuffer
from minimax_engine.games.game_logic import GameLogic
from minimax_engine.games.game_rules import board_full, has_line, in_bounds, line_counts, line_indices
from minimax_engine.games.game_state import GameState

# Cell strings: each cell value maps to its display string
CELL_STRINGS = {0: " ", 1: "X", 2: "O"}

# Pre-computed winning lines (indices into flattened 3x3 board)
_WIN_LINES = line_indices(3, 3, 3)

Move = Tuple[int, int]


class TicTacToe(GameLogic):
    """TicTacToe with an absolute evaluation from `maximizing_player`'s side."""

    __slots__ = ('maximizing_player',)

    MAX_MOVES = 9

    def __init__(self, maximizing_player: int = 1):
        if maximizing_player not in (1, 2):
            raise ValueError(f"maximizing_player must be 1 or 2, got {maximizing_player}")
        self.maximizing_player = maximizing_player

    def game_id(self) -> str:
        return "tic_tac_toe"

    def initial_state(self) -> GameState:
        return GameState(np.zeros((3, 3), dtype=np.int8), current_player=1)

    # ------------------------------------------------------------------
    # Engine contract
    # ------------------------------------------------------------------

    def evaluate(self, state: GameState) -> int:
        """
        +WIN_SCORE / -WIN_SCORE for a decided game, 0 for a draw.

        Otherwise lines still open only to the maximizing side minus
        lines open only to the opponent.
        """
        me = self.maximizing_player
        if state.winner == me:
            return WIN_SCORE
        if state.winner != 0:
            return -WIN_SCORE
        if board_full(state.board):
            return DRAW_SCORE

        mine = line_counts(state.board, _WIN_LINES, me)
        theirs = line_counts(state.board, _WIN_LINES, 3 - me)
        return int(np.count_nonzero((mine > 0) & (theirs == 0))
                   - np.count_nonzero((theirs > 0) & (mine == 0)))

    def generate_moves(self, state: GameState, moves: MoveBuffer, max_moves: int) -> int:
        count = 0
        for r, c in np.argwhere(state.board == 0):
            if count >= max_moves:
                break
            moves[count] = (int(r), int(c))
            count += 1
        return count

    def apply_move(self, state: GameState, move: Move) -> None:
        r, c = move
        if not in_bounds(state.board, r, c):
            raise ValueError(f"Cell ({r},{c}) is off the board")
        if state.board[r, c] != 0:
            raise ValueError(f"Cell ({r},{c}) is occupied")

        player = state.current_player
        state.board[r, c] = player
        state.last_move = (r, c)
        if has_line(state.board, _WIN_LINES, player):
            state.winner = player

        state.current_player = 3 - player  # Toggle 1↔2

    def is_terminal(self, state: GameState) -> bool:
        return state.winner != 0 or board_full(state.board)

    def is_maximizing_player(self, state: GameState) -> bool:
        return state.current_player == self.maximizing_player

    # ------------------------------------------------------------------
    # Host helpers
    # ------------------------------------------------------------------

    def parse_move(self, text: str) -> Move:
        """Parse 'row,col' (0-based)."""
        parts = [p.strip() for p in text.split(",")]
        if len(parts) != 2:
            raise ValueError(f"Expected 'row,col', got {text!r}")
        r, c = (int(p) for p in parts)
        return r, c

    def format_move(self, move: Move) -> str:
        return f"{move[0]},{move[1]}"

    def state_string(self, state: GameState) -> str:
        board = state.board
        lines = ["╭───┬───┬───╮"]
        for i in range(3):
            row = "│ " + " │ ".join(CELL_STRINGS[int(board[i, j])] for j in range(3)) + " │"
            lines.append(row)
            if i < 2:
                lines.append("├───┼───┼───┤")
        lines.append("╰───┴───┴───╯")
        return "\n".join(lines)
