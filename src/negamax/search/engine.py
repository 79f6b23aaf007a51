"""
Negamax search with alpha-beta pruning and a transposition table.

The engine drives a GameBase in place: every node generates moves, makes
each one, recurses with the window negated and swapped, and unmakes it
again before moving on. Results are cached by state hash and perspective,
along with a flag recording whether the stored score is exact or only a
bound.

Scores are always relative to the side being searched for:

    score(state, perspective) == -score(state, -perspective)

so a single recursive function serves both players.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Optional, TYPE_CHECKING

from negamax.core.types import (
    INFINITY,
    EvaluationEntry,
    Flag,
    validate_perspective,
)
from negamax.errors import NoLegalMovesError
from negamax.search.transposition import TranspositionTable

if TYPE_CHECKING:
    from negamax.core.move import Move
    from negamax.games.game_base import GameBase

logger = logging.getLogger(__name__)


@dataclass
class SearchStats:
    """Counters for the most recent play() call."""

    nodes: int = 0             # evaluate_play calls
    cache_hits: int = 0        # lookups deep enough to use
    cache_cutoffs: int = 0     # nodes answered from the cache alone
    beta_cutoffs: int = 0      # move loops stopped early by alpha >= beta
    leaf_evaluations: int = 0  # depth-0 or terminal nodes

    def as_dict(self) -> dict:
        return asdict(self)


class NegamaxEngine:
    """
    Plays any GameBase by depth-bounded negamax search.

    The engine owns its transposition table; it is never shared with other
    engines or games. Call clear_cache() when switching to an unrelated game.

    Example:
        game = Nim(heaps=(3,))
        engine = NegamaxEngine(game)
        entry = engine.play(depth=3, perspective=MAXIMIZING)
        entry.move    # Move(heap=0, take=2), already applied to `game`
        entry.result  # 1.0
    """

    def __init__(self, game: "GameBase", max_cache_entries: Optional[int] = None):
        self.game = game
        self.cache = TranspositionTable(max_entries=max_cache_entries)
        self.stats = SearchStats()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def play(self, depth: int, perspective: int) -> EvaluationEntry:
        """
        Search `depth` plies for `perspective` and apply the best move.

        Args:
            depth: Ply budget, at least 1
            perspective: +1 to maximize player 1's evaluation, -1 to minimize it

        Returns:
            The root EvaluationEntry. Its move has been applied to the game
            and its result is the score from `perspective`.

        Raises:
            ValueError: Invalid depth or perspective
            NoLegalMovesError: The current position has no legal moves
        """
        validate_perspective(perspective)
        if depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {depth}")

        self.stats = SearchStats()
        # Full window for both sides; the sign flip in evaluate_play encodes the side
        entry = self.evaluate_play(depth, -INFINITY, INFINITY, perspective)

        if entry.move is None:
            raise NoLegalMovesError(
                f"No legal moves for perspective {perspective:+d} in {self.game.game_id()}"
            )

        logger.debug(
            "play(depth=%d, perspective=%+d) -> %r score=%.3f flag=%s stats=%s",
            depth, perspective, entry.move, entry.result, entry.flag.name,
            self.stats.as_dict(),
        )
        self.game.make_move(entry.move)
        return entry

    def clear_cache(self) -> None:
        """Drop every cached evaluation."""
        logger.debug("Clearing transposition table (%d entries)", len(self.cache))
        self.cache.clear()

    def cache_key(self, perspective: int) -> int:
        """Transposition key for the current state searched for `perspective`."""
        return hash((self.game.hash_board_state(), perspective))

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def evaluate_play(
        self,
        depth: int,
        alpha: float,
        beta: float,
        perspective: int,
    ) -> EvaluationEntry:
        """
        Negamax node: best score and move for `perspective` from the current state.

        Args:
            depth: Remaining plies to search
            alpha: Lowest score the side to move is already guaranteed
            beta: Highest score the opponent will allow
            perspective: +1 or -1, sign applied to the canonical evaluation

        Returns:
            EvaluationEntry for the current state. Leaf entries carry no move.
        """
        self.stats.nodes += 1
        alpha_original = alpha

        # Scores are relative to perspective, so each side gets its own entry
        cached = self.cache.get(self.cache_key(perspective))
        if cached is not None and cached.depth >= depth:
            self.stats.cache_hits += 1
            if cached.flag is Flag.EXACT:
                self.stats.cache_cutoffs += 1
                return cached
            if cached.flag is Flag.LOWER_BOUND:
                alpha = max(alpha, cached.result)
            elif cached.flag is Flag.UPPER_BOUND:
                beta = min(beta, cached.result)
            if alpha >= beta:
                self.stats.cache_cutoffs += 1
                return cached

        moves = self.game.generate_all_moves()
        if depth == 0 or not moves:
            self.stats.leaf_evaluations += 1
            return EvaluationEntry(depth, perspective * self.game.evaluate(), Flag.EXACT, None)

        # Cheap 1-ply ordering; sorted() is stable so ties keep generation order
        ordered = sorted(moves, key=self._shallow_evaluation)

        best_value = -INFINITY
        best_move: Optional["Move"] = None
        for move in ordered:
            self.game.make_move(move)
            try:
                value = -self.evaluate_play(depth - 1, -beta, -alpha, -perspective).result
            finally:
                self.game.unmake_move(move)

            if best_move is None or best_value < value:
                best_value = value
                best_move = move

            alpha = max(alpha, best_value)
            if alpha >= beta:
                self.stats.beta_cutoffs += 1
                break

        if best_value <= alpha_original:
            flag = Flag.UPPER_BOUND
        elif best_value >= beta:
            flag = Flag.LOWER_BOUND
        else:
            flag = Flag.EXACT

        entry = EvaluationEntry(depth, best_value, flag, best_move)
        self.cache.store(self.cache_key(perspective), entry)
        return entry

    def _shallow_evaluation(self, move: "Move") -> float:
        """Canonical evaluation one ply after `move`."""
        self.game.make_move(move)
        try:
            return self.game.evaluate()
        finally:
            self.game.unmake_move(move)
