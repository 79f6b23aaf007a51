"""
Core module - moves, evaluation records and hashing.

This module provides the building blocks shared by games and the search engine.
"""

from negamax.core.move import Move
from negamax.core.types import (
    Flag,
    EvaluationEntry,
    MAXIMIZING,
    MINIMIZING,
    INFINITY,
    perspective_for,
    validate_perspective,
)
from negamax.core.hashing import hash_board

__all__ = [
    # Types
    "Move",
    "Flag",
    "EvaluationEntry",
    # Constants
    "MAXIMIZING",
    "MINIMIZING",
    "INFINITY",
    # Functions
    "perspective_for",
    "validate_perspective",
    "hash_board",
]
