"""
Search module - negamax engine and its transposition table.
"""

from negamax.search.engine import NegamaxEngine, SearchStats
from negamax.search.transposition import TranspositionTable

__all__ = [
    "NegamaxEngine",
    "SearchStats",
    "TranspositionTable",
]
