"""
NumPy utilities for grid games.

Winning lines are precomputed once per board shape as arrays of flat
indices, so checking a board is a single fancy-index plus reductions.
"""

from __future__ import annotations

import numpy as np

# (dr, dc) steps: horizontal, vertical, diagonal, anti-diagonal
LINE_DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))


def in_bounds(board: np.ndarray, r: int, c: int) -> bool:
    """Return True if (r, c) is inside the board."""
    rows, cols = board.shape
    return 0 <= r < rows and 0 <= c < cols


def line_indices(rows: int, cols: int, length: int) -> np.ndarray:
    """
    All straight windows of `length` cells on a rows x cols board.

    Returns:
        int array of shape (N, length) holding flat (row-major) indices,
        ordered rows, columns, diagonals, anti-diagonals.
    """
    lines = []
    for dr, dc in LINE_DIRECTIONS:
        for r in range(rows):
            for c in range(cols):
                end_r = r + dr * (length - 1)
                end_c = c + dc * (length - 1)
                if 0 <= end_r < rows and 0 <= end_c < cols:
                    lines.append([(r + dr * i) * cols + (c + dc * i) for i in range(length)])
    return np.array(lines, dtype=np.intp)


def line_counts(board: np.ndarray, lines: np.ndarray, player: int) -> np.ndarray:
    """Number of `player` pieces in each line."""
    return np.count_nonzero(board.ravel()[lines] == player, axis=1)


def has_line(board: np.ndarray, lines: np.ndarray, player: int) -> bool:
    """Return True if `player` fills any line completely."""
    return bool(np.any(line_counts(board, lines, player) == lines.shape[1]))


def board_full(board: np.ndarray) -> bool:
    """Return True if no cell is empty (0)."""
    return not np.any(board == 0)
