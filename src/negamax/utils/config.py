"""
Configuration and game registry.
"""

from typing import Optional

import numpy as np

from negamax.games import Nim, TicTacToe
from negamax.games.game_state import GameState


# ---------------------------------------------------------------------------
# Game Registry
# ---------------------------------------------------------------------------

GAMES = {
    "nim": Nim,
    "tic_tac_toe": TicTacToe,
}

INITIAL_STATES = {
    "nim": GameState(
        np.array([3], dtype=np.int16),
        current_player=1,
    ),
    "tic_tac_toe": GameState(
        np.zeros((3, 3), dtype=np.int8),
        current_player=1,
    ),
}


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

DEFAULT_DEPTH = 9  # Enough to solve every bundled game outright
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class Config:
    """Search configuration with sensible defaults."""

    def __init__(
        self,
        game_name: str = "tic_tac_toe",
        depth: int = DEFAULT_DEPTH,
        max_cache_entries: Optional[int] = None,
        log_level: str = "WARNING",
    ):
        if game_name not in GAMES:
            available = ", ".join(GAMES.keys())
            raise ValueError(f"Unknown game: {game_name}. Available: {available}")
        if depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {depth}")
        if max_cache_entries is not None and max_cache_entries < 1:
            raise ValueError(f"Cache size must be at least 1, got {max_cache_entries}")
        if log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {log_level}. Available: {', '.join(LOG_LEVELS)}")

        self.game_name = game_name
        self.depth = depth
        self.max_cache_entries = max_cache_entries  # None = unbounded
        self.log_level = log_level.upper()


# Default configuration
DEFAULT_CONFIG = Config()
