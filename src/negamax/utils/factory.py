"""
Factory functions for creating games and search engines.
"""

from negamax.games.game_base import GameBase
from negamax.games.game_state import GameState
from negamax.search.engine import NegamaxEngine
from negamax.utils.config import DEFAULT_CONFIG, GAMES, INITIAL_STATES, Config


def create_game(game_name: str) -> GameBase:
    """
    Create a game instance with its initial state.

    Args:
        game_name: Key from GAMES registry (e.g., "tic_tac_toe")

    Returns:
        Configured game instance
    """
    if game_name not in GAMES:
        available = ", ".join(GAMES.keys())
        raise ValueError(f"Unknown game: {game_name}. Available: {available}")

    game_class = GAMES[game_name]
    initial_state: GameState = INITIAL_STATES[game_name]

    game = game_class()
    game.set_state(initial_state.copy())

    return game


def create_engine(game: GameBase, config: Config = DEFAULT_CONFIG) -> NegamaxEngine:
    """
    Create a search engine bound to `game`.

    Args:
        game: The game the engine will search and play
        config: Supplies the cache bound (max_cache_entries)

    Returns:
        Engine with an empty transposition table
    """
    return NegamaxEngine(game, max_cache_entries=config.max_cache_entries)
