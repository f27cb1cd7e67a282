"""
Games module - the GameLogic contract and bundled game implementations.
"""

from minimax_engine.games.game_state import GameState
from minimax_engine.games.game_logic import GameLogic
from minimax_engine.games.game_rules import in_bounds, board_full, line_indices, line_counts, has_line
from minimax_engine.games.tic_tac_toe import TicTacToe
from minimax_engine.games.connect_four import ConnectFour

__all__ = [
    "GameState",
    "GameLogic",
    "TicTacToe",
    "ConnectFour",
    "in_bounds",
    "board_full",
    "line_indices",
    "line_counts",
    "has_line",
]
