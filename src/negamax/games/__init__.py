"""
Games module - searchable board game implementations.
"""

from negamax.games.game_state import GameState
from negamax.games.game_base import GameBase
from negamax.games.nim import Nim
from negamax.games.tic_tac_toe import TicTacToe

__all__ = [
    "GameState",
    "GameBase",
    "Nim",
    "TicTacToe",
]
