"""
Misère Nim - take stones from a heap; whoever takes the last stone loses.

Heaps are stored as an int16 board of stone counts:
    board[i] = stones left in heap i

With a single heap of 3 stones and max_take=2 the first player wins by
taking 2, leaving the opponent forced to take the last stone.
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from negamax.core.move import Move
from negamax.games.game_base import GameBase
from negamax.games.game_state import GameState


STONE = "●"


class Nim(GameBase):
    """Misère Nim on one or more heaps."""

    __slots__ = ('state', 'max_take')

    def __init__(self, heaps: Sequence[int] = (3,), max_take: int = 2):
        if max_take < 1:
            raise ValueError(f"max_take must be at least 1, got {max_take}")
        if any(h < 0 for h in heaps):
            raise ValueError(f"Heap sizes must be non-negative, got {list(heaps)}")
        self.state = GameState(np.array(heaps, dtype=np.int16), current_player=1)
        self.max_take = max_take

    def game_id(self) -> str:
        return "nim"

    def get_state(self) -> GameState:
        return self.state

    def set_state(self, game_state: GameState) -> None:
        self.state = game_state

    def current_player(self) -> int:
        return self.state.current_player

    @property
    def stones_left(self) -> int:
        return int(self.state.board.sum())

    # -- search contract ----------------------------------------------------

    def evaluate(self) -> float:
        """Empty heaps: the player to move wins (their opponent took the last stone)."""
        if self.stones_left > 0:
            return 0.0
        return 1.0 if self.state.current_player == 1 else -1.0

    def hash_board_state(self) -> int:
        return self.state.hash()

    def generate_all_moves(self) -> List[Move]:
        moves = []
        for heap, count in enumerate(self.state.board):
            for take in range(1, min(self.max_take, int(count)) + 1):
                moves.append(Move(heap=heap, take=take))
        return moves

    def make_move(self, move: Move) -> None:
        heap = move.get_attribute("heap")
        take = move.get_attribute("take")

        if heap is None or not 0 <= heap < len(self.state.board):
            raise ValueError(f"Invalid heap: {heap}")
        count = int(self.state.board[heap])
        if take is None or not 1 <= take <= min(self.max_take, count):
            raise ValueError(f"Cannot take {take} from heap {heap} holding {count}")

        self.state.board[heap] -= take
        self.state.toggle_player()

    def unmake_move(self, move: Move) -> None:
        self.state.board[move.get_attribute("heap")] += move.get_attribute("take")
        self.state.toggle_player()

    # -- display ------------------------------------------------------------

    def describe_move(self, move: Move) -> str:
        take = move.get_attribute("take")
        noun = "stone" if take == 1 else "stones"
        return f"take {take} {noun} from heap {move.get_attribute('heap') + 1}"

    def state_string(self) -> str:
        lines = [
            f"Heap {i + 1}: {STONE * int(count) or '-'} ({int(count)})"
            for i, count in enumerate(self.state.board)
        ]
        lines.append(f"Player {self.state.current_player} to move")
        return "\n".join(lines)
