"""
Utilities - configuration, game registry and factories.
"""

from negamax.utils.config import Config, DEFAULT_CONFIG, DEFAULT_DEPTH, GAMES, INITIAL_STATES
from negamax.utils.factory import create_engine, create_game

__all__ = [
    "Config",
    "DEFAULT_CONFIG",
    "DEFAULT_DEPTH",
    "GAMES",
    "INITIAL_STATES",
    "create_engine",
    "create_game",
]
