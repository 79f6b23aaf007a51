"""
GameState - mutable game state container.

Optimized for fast copying and hashing.
"""

from __future__ import annotations

import numpy as np

from negamax.core.hashing import hash_board


class GameState:
    """
    Lightweight game state container.

    Uses small int boards for fast copy/hash:
        0 = empty
        1 = player 1's piece
        2 = player 2's piece
    Games with counts (e.g. Nim heaps) store the counts directly.
    """
    __slots__ = ('board', 'current_player')

    def __init__(self, board: np.ndarray, current_player: int):
        self.board = board
        self.current_player = current_player

    def copy(self) -> "GameState":
        """Fast copy - board.copy() is optimized for contiguous int arrays."""
        return GameState(self.board.copy(), self.current_player)

    def hash(self) -> int:
        return hash_board(self.board, self.current_player)

    def toggle_player(self) -> None:
        self.current_player = 3 - self.current_player  # Toggle 1↔2

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return (
            self.current_player == other.current_player
            and self.board.shape == other.board.shape
            and bool(np.array_equal(self.board, other.board))
        )

    __hash__ = None  # type: ignore[assignment]
