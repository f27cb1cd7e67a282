"""
Command-line interface for playing games against the minimax engine.
"""

import argparse
import logging

from minimax_engine.api import play_game
from minimax_engine.utils.config import GAMES, SearchConfig
from minimax_engine.utils.factory import create_engine


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play two-player games against an alpha-beta minimax engine"
    )
    parser.add_argument(
        "--game", "-g",
        choices=list(GAMES.keys()),
        default="tic_tac_toe",
        help="Game to play (default: tic_tac_toe)",
    )
    parser.add_argument(
        "--depth", "-d",
        type=int,
        default=None,
        help="Search depth in plies (default: per game)",
    )
    parser.add_argument(
        "--max-moves",
        type=int,
        default=None,
        help="Move buffer capacity per position (default: game's worst case)",
    )
    parser.add_argument(
        "--self-play",
        action="store_true",
        help="Engine plays for all players (no human players)",
    )
    parser.add_argument(
        "--players", "-p",
        type=str,
        default=None,
        help="Comma-separated list of human player numbers (e.g., '1,2'). Overrides --self-play.",
    )
    parser.add_argument(
        "--no-pruning",
        action="store_true",
        help="Disable alpha-beta cutoffs (plain minimax)",
    )
    parser.add_argument(
        "--check-contracts",
        action="store_true",
        help="Raise on game logic contract violations",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log search statistics",
    )
    return parser.parse_args(argv)


def parse_human_players(players_str: str | None, num_players: int, game_id: str, self_play: bool) -> list[int]:
    """Parse and validate the human players argument."""
    if self_play and players_str is None:
        return []

    if players_str is None:
        return [1]  # Default: player 1 is human

    # Parse comma-separated values
    try:
        human_players = [int(p.strip()) for p in players_str.split(",") if p.strip()]
    except ValueError as e:
        raise ValueError(
            f"Invalid --players format: '{players_str}'. "
            "Expected comma-separated integers (e.g., '1,2')."
        ) from e

    # Validate player numbers
    invalid = [p for p in human_players if p < 1 or p > num_players]
    if invalid:
        raise ValueError(
            f"Invalid player number(s): {invalid}. {game_id} only supports players 1-{num_players}."
        )

    return sorted(set(human_players))


def main(argv=None) -> None:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = SearchConfig(
        game_name=args.game,
        depth=args.depth,
        max_moves=args.max_moves,
        pruning=not args.no_pruning,
        check_contracts=args.check_contracts,
    )
    logic, engine = create_engine(config)

    human_players = parse_human_players(args.players, 2, logic.game_id(), args.self_play)

    play_game(logic, engine, human_players=human_players)


if __name__ == "__main__":
    main()
