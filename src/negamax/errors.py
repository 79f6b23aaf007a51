"""
Exceptions raised by the search engine.
"""


class NegamaxError(Exception):
    """Base class for search engine errors."""


class NoLegalMovesError(NegamaxError):
    """Raised when a move is requested from a position with no legal moves."""
