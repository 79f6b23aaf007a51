"""
Negamax - a generic alpha-beta game-tree search core.

Any two-player, zero-sum, perfect-information game that implements
GameBase (evaluate, hash_board_state, generate_all_moves, make_move,
unmake_move) can be searched and played.

Quick Start:
    from negamax import NegamaxEngine, MAXIMIZING
    from negamax.games import Nim

    game = Nim(heaps=(3,))
    engine = NegamaxEngine(game)
    entry = engine.play(depth=3, perspective=MAXIMIZING)

Modules:
    core   - Move attribute bag, evaluation records, hashing
    games  - GameBase contract and bundled games (Nim, TicTacToe)
    search - Negamax engine and transposition table
    utils  - Configuration, game registry, factories
"""

from negamax.api import play_match
from negamax.core import (
    Move,
    Flag,
    EvaluationEntry,
    MAXIMIZING,
    MINIMIZING,
    perspective_for,
)
from negamax.errors import NegamaxError, NoLegalMovesError
from negamax.games.game_base import GameBase
from negamax.search import NegamaxEngine, SearchStats, TranspositionTable

__version__ = "1.0.0"

__all__ = [
    # Main API
    "NegamaxEngine",
    "play_match",
    "GameBase",
    # Types
    "Move",
    "Flag",
    "EvaluationEntry",
    "SearchStats",
    "TranspositionTable",
    "MAXIMIZING",
    "MINIMIZING",
    "perspective_for",
    # Errors
    "NegamaxError",
    "NoLegalMovesError",
]
