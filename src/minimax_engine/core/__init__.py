"""
Core module - score bounds, move buffer and exceptions.
"""

from minimax_engine.core.errors import ContractViolation, MinimaxError
from minimax_engine.core.types import (
    DRAW_SCORE,
    LOSS_SCORE,
    SCORE_MAX,
    SCORE_MIN,
    WIN_SCORE,
    MoveBuffer,
    in_score_range,
)

__all__ = [
    "MoveBuffer",
    "SCORE_MIN",
    "SCORE_MAX",
    "WIN_SCORE",
    "LOSS_SCORE",
    "DRAW_SCORE",
    "in_score_range",
    "MinimaxError",
    "ContractViolation",
]
