"""
GameBase - abstract base class for all searchable games.
"""

from abc import ABC, abstractmethod
from typing import List

from negamax.core.move import Move


class GameBase(ABC):
    """
    Abstract base class for all searchable board games.

    IMPORTANT ARCHITECTURE NOTE:
    -----------------------------
    - The search engine mutates the game IN PLACE via make_move/unmake_move.
    - unmake_move must restore EVERY field exactly. The engine never copies
      the game, so anything left behind corrupts the rest of the search.
    - evaluate() always scores from player 1's point of view. The engine
      applies the sign for the side it is searching for.

    Do NOT add clone()/deep_clone() here.
    """

    # -- search contract ----------------------------------------------------

    @abstractmethod
    def evaluate(self) -> float:
        """
        Static score of the current state from player 1's perspective.
        Must be deterministic and side-effect free.
        """
        pass

    @abstractmethod
    def hash_board_state(self) -> int:
        """
        Reproducible fingerprint of the current state (including the side
        to move). Equal states must hash equal.
        """
        pass

    @abstractmethod
    def generate_all_moves(self) -> List[Move]:
        """
        Return all legal moves from the current state.
        An empty list means the game is over.
        """
        pass

    @abstractmethod
    def make_move(self, move: Move) -> None:
        """Apply a move to the game. Mutates internal state."""
        pass

    @abstractmethod
    def unmake_move(self, move: Move) -> None:
        """Exactly reverse the most recent make_move(move)."""
        pass

    # -- play surface -------------------------------------------------------

    @abstractmethod
    def game_id(self) -> str:
        """Return a stable identifier (e.g. 'tic_tac_toe')."""
        pass

    @abstractmethod
    def current_player(self) -> int:
        """Return ID of player to act (1 or 2)."""
        pass

    @abstractmethod
    def state_string(self) -> str:
        """Pretty string representation of the state."""
        pass

    def describe_move(self, move: Move) -> str:
        """Human readable move description (defaults to the attribute bag)."""
        return ", ".join(f"{k}={v}" for k, v in move.attributes.items())
