"""
TicTacToe game implementation - make/unmake adapter.

Uses int8 board:
    0 = empty
    1 = player 1 (X)
    2 = player 2 (O)
"""

from __future__ import annotations

from typing import List

import numpy as np

from negamax.core.move import Move
from negamax.games.game_base import GameBase
from negamax.games.game_state import GameState

# Cell strings: each cell value maps to its display string
CELL_STRINGS = {0: " ", 1: "X", 2: "O"}

# Pre-computed winning lines (indices into flattened 3x3 board)
_WIN_LINES = np.array([
    [0, 1, 2], [3, 4, 5], [6, 7, 8],  # rows
    [0, 3, 6], [1, 4, 7], [2, 5, 8],  # cols
    [0, 4, 8], [2, 4, 6],             # diagonals
], dtype=np.int8)

# Winner -> canonical (player 1) score
_SCORES = {0: 0.0, 1: 1.0, 2: -1.0}


class TicTacToe(GameBase):
    """TicTacToe with in-place make/unmake."""

    __slots__ = ('state', 'winner')

    def __init__(self):
        self.state = GameState(np.zeros((3, 3), dtype=np.int8), current_player=1)
        self.winner = 0  # 0=none, 1=player1, 2=player2

    def game_id(self) -> str:
        return "tic_tac_toe"

    def get_state(self) -> GameState:
        return self.state

    def set_state(self, game_state: GameState) -> None:
        self.state = game_state
        # Recompute winner from state
        self.winner = self._compute_winner()

    def current_player(self) -> int:
        return self.state.current_player

    def is_over(self) -> bool:
        return self.winner != 0 or not np.any(self.state.board == 0)

    # -- search contract ----------------------------------------------------

    def evaluate(self) -> float:
        return _SCORES[self.winner]

    def hash_board_state(self) -> int:
        return self.state.hash()

    def generate_all_moves(self) -> List[Move]:
        """Empty cells in row-major order; none once somebody has won."""
        if self.winner != 0:
            return []
        return [Move(row=int(r), col=int(c)) for r, c in np.argwhere(self.state.board == 0)]

    def make_move(self, move: Move) -> None:
        r, c = move.get_attribute("row"), move.get_attribute("col")

        if r is None or c is None or not (0 <= r < 3 and 0 <= c < 3):
            raise ValueError(f"Cell ({r},{c}) is off the board")
        if self.winner != 0:
            raise ValueError("Game is already won")
        if self.state.board[r, c] != 0:
            raise ValueError(f"Cell ({r},{c}) is occupied")

        player = self.state.current_player
        self.state.board[r, c] = player

        # Check winner using flattened view
        flat = self.state.board.ravel()
        for line in _WIN_LINES:
            if flat[line[0]] == player and flat[line[1]] == player and flat[line[2]] == player:
                self.winner = player
                break

        self.state.toggle_player()

    def unmake_move(self, move: Move) -> None:
        # Moves are only generated while winner == 0, so undoing always clears it
        self.state.board[move.get_attribute("row"), move.get_attribute("col")] = 0
        self.winner = 0
        self.state.toggle_player()

    def _compute_winner(self) -> int:
        """Recompute winner from current board state."""
        flat = self.state.board.ravel()
        for line in _WIN_LINES:
            v = flat[line[0]]
            if v != 0 and flat[line[1]] == v and flat[line[2]] == v:
                return int(v)
        return 0

    # -- display ------------------------------------------------------------

    def describe_move(self, move: Move) -> str:
        return f"({move.get_attribute('row')},{move.get_attribute('col')})"

    def state_string(self) -> str:
        board = self.state.board
        lines = ["╭───┬───┬───╮"]
        for i in range(3):
            row = "│ " + " │ ".join(CELL_STRINGS[board[i, j]] for j in range(3)) + " │"
            lines.append(row)
            if i < 2:
                lines.append("├───┼───┼───┤")
        lines.append("╰───┴───┴───╯")
        return "\n".join(lines)
