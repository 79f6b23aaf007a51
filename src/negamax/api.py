"""
Public API for playing games with the negamax engine.

Usage:
    from negamax import NegamaxEngine, play_match
    from negamax.games import TicTacToe

    engine = NegamaxEngine(TicTacToe())
    play_match(engine, depth=9, human_players=[1])
"""

from __future__ import annotations

import logging
from typing import List, Optional, TYPE_CHECKING

from negamax.core.move import Move
from negamax.core.types import perspective_for
from negamax.search.engine import NegamaxEngine

if TYPE_CHECKING:
    from negamax.games.game_base import GameBase

logger = logging.getLogger(__name__)


def _ai_turn(engine: NegamaxEngine, depth: int) -> Move:
    """Engine searches and applies its move. Returns the move."""
    player = engine.game.current_player()
    perspective = perspective_for(player)
    entry = engine.play(depth, perspective)
    logger.info(
        "Player %d (perspective %+d) scored %.3f, %d nodes, %d cache cutoffs",
        player, perspective, entry.result,
        engine.stats.nodes, engine.stats.cache_cutoffs,
    )
    return entry.move


def _human_turn(game: "GameBase") -> Move:
    """Prompt human for a move index, apply it, return move."""
    moves = game.generate_all_moves()
    print(f"\nYour turn (Player {game.current_player()})")
    for i, move in enumerate(moves):
        print(f"  {i}: {game.describe_move(move)}")

    while True:
        raw = input("Move: ").strip()
        try:
            move = moves[int(raw)]
        except (ValueError, IndexError):
            print(f"Invalid choice: '{raw}'. Enter a number from 0 to {len(moves) - 1}.")
            continue
        game.make_move(move)
        return move


def result_string(game: "GameBase") -> str:
    """Describe the outcome from the canonical evaluation."""
    score = game.evaluate()
    if score > 0:
        return "Player 1 wins"
    if score < 0:
        return "Player 2 wins"
    return "Draw"


def play_match(
    engine: NegamaxEngine,
    depth: int,
    human_players: Optional[List[int]] = None,
    max_turns: Optional[int] = None,
) -> List[Move]:
    """
    Main entry point: play engine.game to the end.

    Parameters
    ----------
    engine : NegamaxEngine
        Engine bound to the game being played.
    depth : int
        Search depth for every AI move.
    human_players : List[int], optional
        Player IDs controlled by human input.
    max_turns : int, optional
        Stop after this many moves even if the game is not over.

    Returns
    -------
    List[Move]
        Moves played, in order.
    """
    game = engine.game
    human_set = set(human_players or [])
    played: List[Move] = []

    print(f"Starting {game.game_id()} with search depth {depth}")
    print(game.state_string())

    try:
        while game.generate_all_moves():
            if max_turns is not None and len(played) >= max_turns:
                print(f"\nStopped after {len(played)} moves")
                return played

            current = game.current_player()
            if current in human_set:
                move = _human_turn(game)
                print(f"\nYou played: {game.describe_move(move)}")
            else:
                move = _ai_turn(engine, depth)
                print(f"\nAI (Player {current}) played: {game.describe_move(move)}")

            played.append(move)
            print(game.state_string())

        print("\n" + "=" * 40)
        print(f"GAME OVER: {result_string(game)}")
        print("=" * 40)

        stats = engine.cache.stats()
        print(
            f"Cache: {stats['entries']} entries, "
            f"{stats['hits']} hits, "
            f"{stats['evictions']} evictions"
        )

    except KeyboardInterrupt:
        print("\nInterrupted - stopping match...")
    except Exception:
        logger.exception("Fatal error in match loop")
        raise

    return played


__all__ = [
    "play_match",
    "result_string",
    "NegamaxEngine",
]
