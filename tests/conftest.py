"""
Shared test fixtures for negamax tests.

Design principles:
- Game-agnostic fixtures where possible
- Instrumented adapters for counting engine calls
- Minimal, focused fixtures
"""

import random
from collections import Counter
from typing import Callable, Dict, List, Tuple

import pytest

from negamax.core.move import Move
from negamax.games.game_base import GameBase
from negamax.games.nim import Nim
from negamax.games.tic_tac_toe import TicTacToe
from negamax.search.engine import NegamaxEngine


# =============================================================================
# Instrumented Games
# =============================================================================

class CountingNim(Nim):
    """Nim that counts adapter calls and checks make/unmake pairing."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.calls: Counter = Counter()
        self.made: List[Move] = []
        self.lifo_violations = 0

    def reset_counts(self) -> None:
        self.calls.clear()

    def evaluate(self) -> float:
        self.calls["evaluate"] += 1
        return super().evaluate()

    def hash_board_state(self) -> int:
        self.calls["hash_board_state"] += 1
        return super().hash_board_state()

    def generate_all_moves(self) -> List[Move]:
        self.calls["generate_all_moves"] += 1
        return super().generate_all_moves()

    def make_move(self, move: Move) -> None:
        self.calls["make_move"] += 1
        super().make_move(move)
        self.made.append(move)

    def unmake_move(self, move: Move) -> None:
        self.calls["unmake_move"] += 1
        if not self.made or self.made.pop() is not move:
            self.lifo_violations += 1
        super().unmake_move(move)


class TreeGame(GameBase):
    """
    Explicit game tree addressed by the path of child indices from the root.

    values[path]   = canonical (player 1) static value of the node
    children[path] = number of children (missing or 0 = terminal)
    """

    def __init__(self, values: Dict[Tuple[int, ...], float], children: Dict[Tuple[int, ...], int]):
        self.values = values
        self.children = children
        self.path: List[int] = []

    def evaluate(self) -> float:
        return self.values[tuple(self.path)]

    def hash_board_state(self) -> int:
        return hash(tuple(self.path))

    def generate_all_moves(self) -> List[Move]:
        return [Move(child=i) for i in range(self.children.get(tuple(self.path), 0))]

    def make_move(self, move: Move) -> None:
        self.path.append(move.get_attribute("child"))

    def unmake_move(self, move: Move) -> None:
        self.path.pop()

    def game_id(self) -> str:
        return "tree"

    def current_player(self) -> int:
        return 1 if len(self.path) % 2 == 0 else 2

    def state_string(self) -> str:
        return f"path={self.path}"


def make_random_tree(seed: int, depth: int, max_branching: int = 3) -> TreeGame:
    """Random tree with distinct node values; some inner nodes end early."""
    rng = random.Random(seed)
    values: Dict[Tuple[int, ...], float] = {}
    children: Dict[Tuple[int, ...], int] = {}

    frontier: List[Tuple[int, ...]] = [()]
    while frontier:
        path = frontier.pop()
        values[path] = rng.uniform(-100.0, 100.0)
        if len(path) >= depth:
            continue
        n = rng.randint(1 if not path else 0, max_branching)
        children[path] = n
        frontier.extend(path + (i,) for i in range(n))

    return TreeGame(values, children)


# =============================================================================
# Game Fixtures
# =============================================================================

@pytest.fixture
def nim() -> Nim:
    """Single heap of 3 stones, take 1 or 2."""
    return Nim(heaps=(3,), max_take=2)


@pytest.fixture
def counting_nim() -> CountingNim:
    """Instrumented single-heap Nim."""
    return CountingNim(heaps=(3,), max_take=2)


@pytest.fixture
def counting_nim_factory() -> Callable[..., CountingNim]:
    """Build instrumented Nim games with custom heaps."""
    return CountingNim


@pytest.fixture
def tic_tac_toe() -> TicTacToe:
    """Fresh TicTacToe game."""
    return TicTacToe()


@pytest.fixture
def random_tree() -> Callable[..., TreeGame]:
    """Factory for reproducible random game trees."""
    return make_random_tree


@pytest.fixture
def tree_game_class() -> type:
    """TreeGame class for hand-built trees."""
    return TreeGame


# =============================================================================
# Engine Fixtures
# =============================================================================

@pytest.fixture
def nim_engine(nim: Nim) -> NegamaxEngine:
    return NegamaxEngine(nim)


@pytest.fixture
def counting_engine(counting_nim: CountingNim) -> NegamaxEngine:
    return NegamaxEngine(counting_nim)
