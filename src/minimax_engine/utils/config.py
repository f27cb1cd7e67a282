"""
Configuration and game registry.
"""

from typing import Optional

from minimax_engine.games import ConnectFour, TicTacToe
from minimax_engine.search.engine import DEFAULT_MAX_DEPTH, DEFAULT_MAX_MOVES


# ---------------------------------------------------------------------------
# Game Registry
# ---------------------------------------------------------------------------

GAMES = {
    "tic_tac_toe": TicTacToe,
    "connect_four": ConnectFour,
}

# Default search depth per game (plies)
GAME_DEPTHS = {
    "tic_tac_toe": 9,
    "connect_four": 5,
}


# ---------------------------------------------------------------------------
# Search Settings
# ---------------------------------------------------------------------------

class SearchConfig:
    """
    Engine configuration with sensible defaults.

    `depth` defaults to the game's entry in GAME_DEPTHS and `max_moves` to
    the game's own MAX_MOVES (its worst-case branching factor).
    """

    def __init__(
        self,
        game_name: str = "tic_tac_toe",
        depth: Optional[int] = None,
        max_moves: Optional[int] = None,
        pruning: bool = True,
        check_contracts: bool = False,
        maximizing_player: int = 1,
    ):
        if game_name not in GAMES:
            available = ", ".join(GAMES.keys())
            raise ValueError(f"Unknown game: {game_name}. Available: {available}")

        self.game_name = game_name
        self.pruning = pruning
        self.check_contracts = check_contracts
        self.maximizing_player = maximizing_player

        # Derive dependent values
        game_class = GAMES[game_name]
        self.depth = depth if depth is not None else GAME_DEPTHS.get(game_name, DEFAULT_MAX_DEPTH)
        self.max_moves = max_moves if max_moves is not None else game_class.MAX_MOVES

        if self.depth < 1:
            raise ValueError(f"depth must be >= 1, got {self.depth}")
        if self.max_moves < 1:
            raise ValueError(f"max_moves must be >= 1, got {self.max_moves}")

    def __repr__(self) -> str:
        return (
            f"SearchConfig(game_name={self.game_name!r}, depth={self.depth}, "
            f"max_moves={self.max_moves}, pruning={self.pruning}, "
            f"check_contracts={self.check_contracts})"
        )


# Default configuration
DEFAULT_CONFIG = SearchConfig()

__all__ = [
    "GAMES",
    "GAME_DEPTHS",
    "SearchConfig",
    "DEFAULT_CONFIG",
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_MAX_MOVES",
]
