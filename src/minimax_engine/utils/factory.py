"""
Factory functions for creating games and engines.
"""

from typing import Optional, Tuple

from minimax_engine.games.game_logic import GameLogic
from minimax_engine.search.engine import Minimax
from minimax_engine.utils.config import GAMES, SearchConfig


def create_game(game_name: str, maximizing_player: int = 1) -> GameLogic:
    """
    Create a game logic instance.

    Args:
        game_name: Key from GAMES registry (e.g., "tic_tac_toe")
        maximizing_player: Player the evaluation favours (1 or 2)

    Returns:
        Configured game logic
    """
    if game_name not in GAMES:
        available = ", ".join(GAMES.keys())
        raise ValueError(f"Unknown game: {game_name}. Available: {available}")

    return GAMES[game_name](maximizing_player=maximizing_player)


def create_engine(config: Optional[SearchConfig] = None) -> Tuple[GameLogic, Minimax]:
    """
    Create a game and an engine searching it, both from one config.

    Returns:
        (logic, engine)
    """
    config = config or SearchConfig()
    logic = create_game(config.game_name, config.maximizing_player)
    engine = Minimax(
        logic,
        max_moves=config.max_moves,
        max_depth=config.depth,
        pruning=config.pruning,
        check_contracts=config.check_contracts,
    )
    return logic, engine
