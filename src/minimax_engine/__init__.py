"""
Minimax Engine - fixed-depth alpha-beta search for two-player games.

The engine is generic: any game implementing the GameLogic contract
(evaluate, generate_moves, apply_move, is_terminal, is_maximizing_player)
can be searched.

Quick Start:
    from minimax_engine import Minimax, TicTacToe

    game = TicTacToe()
    engine = Minimax(game, max_moves=9, max_depth=9)
    move = engine.find_best_move(game.initial_state())
    print(move, engine.best_score, engine.nodes_searched)

Modules:
    core    - Score bounds, MoveBuffer, exceptions
    games   - GameLogic contract, GameState, bundled games
    search  - The Minimax engine
    utils   - Configuration and factories
"""

from minimax_engine.api import play_game, play_configured_game
from minimax_engine.core import (
    SCORE_MAX,
    SCORE_MIN,
    WIN_SCORE,
    ContractViolation,
    MinimaxError,
    MoveBuffer,
)
from minimax_engine.games import ConnectFour, GameLogic, GameState, TicTacToe
from minimax_engine.search import Minimax

__version__ = "1.0.0"

__all__ = [
    # Main API
    "Minimax",
    "play_game",
    "play_configured_game",
    # Contract
    "GameLogic",
    "GameState",
    "MoveBuffer",
    # Games
    "TicTacToe",
    "ConnectFour",
    # Constants / errors
    "SCORE_MIN",
    "SCORE_MAX",
    "WIN_SCORE",
    "MinimaxError",
    "ContractViolation",
]
