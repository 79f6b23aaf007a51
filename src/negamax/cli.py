"""
Command-line interface for playing games against the negamax engine.
"""

import argparse
import logging
from typing import List, Optional

from negamax.api import play_match
from negamax.utils.config import Config, DEFAULT_DEPTH, GAMES, LOG_LEVELS
from negamax.utils.factory import create_engine, create_game

NUM_PLAYERS = 2


def positive_int(value: str) -> int:
    """argparse type for strictly positive integers."""
    try:
        number = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'") from e
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play two-player games with a negamax alpha-beta engine"
    )
    parser.add_argument(
        "--game", "-g",
        choices=list(GAMES.keys()),
        default="tic_tac_toe",
        help="Game to play (default: tic_tac_toe)",
    )
    parser.add_argument(
        "--depth", "-d",
        type=positive_int,
        default=DEFAULT_DEPTH,
        help=f"Search depth in plies (default: {DEFAULT_DEPTH})",
    )
    parser.add_argument(
        "--cache-size",
        type=positive_int,
        default=None,
        help="Maximum transposition table entries (default: unbounded)",
    )
    parser.add_argument(
        "--self-play",
        action="store_true",
        help="AI plays for all players (no human players)",
    )
    parser.add_argument(
        "--players", "-p",
        type=str,
        default=None,
        help="Comma-separated list of human player numbers (e.g., '1,2'). Overrides --self-play.",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging verbosity (default: WARNING)",
    )
    return parser.parse_args(argv)


def parse_human_players(players_str: Optional[str], game_id: str, self_play: bool) -> List[int]:
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
    invalid = [p for p in human_players if p < 1 or p > NUM_PLAYERS]
    if invalid:
        raise ValueError(
            f"Invalid player number(s): {invalid}. {game_id} only supports players 1-{NUM_PLAYERS}."
        )

    return sorted(set(human_players))


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)

    config = Config(
        game_name=args.game,
        depth=args.depth,
        max_cache_entries=args.cache_size,
        log_level=args.log_level,
    )
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    game = create_game(config.game_name)
    engine = create_engine(game, config)

    human_players = parse_human_players(args.players, game.game_id(), args.self_play)

    play_match(engine, depth=config.depth, human_players=human_players)


if __name__ == "__main__":
    main()
