"""
Search module - alpha-beta minimax engine.
"""

from minimax_engine.search.engine import Minimax, DEFAULT_MAX_DEPTH, DEFAULT_MAX_MOVES

__all__ = [
    "Minimax",
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_MAX_MOVES",
]
