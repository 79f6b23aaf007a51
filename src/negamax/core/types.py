"""
Core types and constants for the search engine.

This module contains:
- Flag: how far a cached search result can be trusted
- EvaluationEntry: the record produced by every search node
- Perspective constants and helpers
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from negamax.core.move import Move


# ---------------------------------------------------------------------------
# Perspectives
# ---------------------------------------------------------------------------

MAXIMIZING = 1   # Player 1: maximizes the canonical evaluation
MINIMIZING = -1  # Player 2: minimizes it

INFINITY = float('inf')


def perspective_for(player_id: int) -> int:
    """Map a player id (1 or 2) to its search perspective (+1 or -1)."""
    if player_id == 1:
        return MAXIMIZING
    if player_id == 2:
        return MINIMIZING
    raise ValueError(f"Unknown player id: {player_id}. Expected 1 or 2.")


def validate_perspective(perspective: int) -> int:
    """Return `perspective` unchanged, or raise ValueError if it is not +1/-1."""
    if perspective not in (MAXIMIZING, MINIMIZING):
        raise ValueError(f"Perspective must be +1 or -1, got {perspective!r}")
    return perspective


# ---------------------------------------------------------------------------
# Cache records
# ---------------------------------------------------------------------------

class Flag(Enum):
    EXACT = auto()
    LOWER_BOUND = auto()  # fail-high: true value may be higher
    UPPER_BOUND = auto()  # fail-low: true value may be lower


@dataclass(frozen=True)
class EvaluationEntry:
    """
    Result of searching one position.

    Attributes:
        depth:  Remaining depth the position was searched to
        result: Score from the perspective in force when it was computed
        flag:   Whether `result` is exact or only a bound
        move:   Best move found from the position (None at leaves)
    """

    depth: int
    result: float
    flag: Flag
    move: Optional[Move] = None

    @property
    def is_exact(self) -> bool:
        return self.flag is Flag.EXACT
