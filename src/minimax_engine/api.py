"""
Public API for playing games against the engine.

Usage:
    from minimax_engine import Minimax, TicTacToe, play_game

    game = TicTacToe()
    engine = Minimax(game, max_moves=9, max_depth=9)
    play_game(game, engine, human_players=[1])
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Optional, TYPE_CHECKING

from minimax_engine.games.game_logic import GameLogic
from minimax_engine.games.game_state import GameState
from minimax_engine.search.engine import Minimax

if TYPE_CHECKING:
    from minimax_engine.utils.config import SearchConfig

logger = logging.getLogger(__name__)


def _ai_turn(logic: GameLogic, engine: Minimax, state: GameState) -> Optional[Any]:
    """Engine selects and applies move. Returns move or None if no valid moves."""
    move = engine.find_best_move(state)
    if move is None:
        return None
    logic.apply_move(state, move)
    return move


def _human_turn(
    logic: GameLogic,
    state: GameState,
    read: Callable[[str], str],
    out: Callable[[str], None],
) -> Any:
    """Prompt human for move, apply it, return move."""
    legal = logic.legal_moves(state)
    if legal:
        out(f"\nYour turn (Player {state.current_player})")
        out(f"Legal moves: {' '.join(logic.format_move(m) for m in legal)}")

    while True:
        raw = read("Move: ").strip()
        try:
            move = logic.parse_move(raw)
            logic.apply_move(state, move)
            return move
        except ValueError as e:
            out(f"Invalid move: {e}")


def play_game(
    logic: GameLogic,
    engine: Minimax,
    human_players: Iterable[int] = (),
    state: Optional[GameState] = None,
    read: Callable[[str], str] = input,
    out: Callable[[str], None] = print,
) -> GameState:
    """
    Main entry point: alternate human and engine turns until the game ends.

    Parameters
    ----------
    logic : GameLogic
        The game being played.
    engine : Minimax
        Engine searching `logic`; plays every non-human player.
    human_players : Iterable[int]
        Player IDs controlled by human input.
    state : GameState, optional
        Starting position (defaults to logic.initial_state()).
    read, out : callables
        Input and output hooks (default: input / print).

    Returns
    -------
    GameState
        The final position.
    """
    human_set = set(human_players)
    state = state if state is not None else logic.initial_state()

    out(f"Starting {logic.game_id()} (depth {engine.max_depth}, "
        f"pruning {'ON' if engine.pruning else 'OFF'})")
    out(logic.state_string(state))

    try:
        while not logic.is_terminal(state):
            current = state.current_player
            if current in human_set:
                move = _human_turn(logic, state, read, out)
                out(f"\nYou played: {logic.format_move(move)}")
            else:
                move = _ai_turn(logic, engine, state)
                if move is None:
                    out(f"\nPlayer {current} has no legal move")
                    break
                out(
                    f"\nAI (Player {current}) played: {logic.format_move(move)} "
                    f"[score {engine.best_score}, {engine.nodes_searched} nodes]"
                )

            out(logic.state_string(state))

        out("\n" + "=" * 40)
        out("GAME OVER")
        out("=" * 40)
        out("Winner: " + (f"Player {state.winner}" if state.winner else "none (draw)"))

    except KeyboardInterrupt:
        out("\nInterrupted - stopping game")
    except Exception:
        logger.exception("Fatal error in game loop")
        raise

    return state


def play_configured_game(
    config: "SearchConfig",
    human_players: Iterable[int] = (),
    **kwargs: Any,
) -> GameState:
    """Build game and engine from `config` and play."""
    from minimax_engine.utils.factory import create_engine

    logic, engine = create_engine(config)
    return play_game(logic, engine, human_players=human_players, **kwargs)


__all__ = [
    "play_game",
    "play_configured_game",
]
