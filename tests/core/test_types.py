"""
Tests for negamax.core.types

Tests perspectives, flags and evaluation entries.
"""

import dataclasses

import pytest

from negamax.core.move import Move
from negamax.core.types import (
    EvaluationEntry,
    Flag,
    MAXIMIZING,
    MINIMIZING,
    perspective_for,
    validate_perspective,
)


class TestPerspectives:
    """Perspective helper tests."""

    def test_constants(self):
        """Perspectives are +1 and -1."""
        assert MAXIMIZING == 1
        assert MINIMIZING == -1

    @pytest.mark.parametrize("player,expected", [(1, 1), (2, -1)])
    def test_perspective_for(self, player, expected):
        """Player 1 maximizes, player 2 minimizes."""
        assert perspective_for(player) == expected

    @pytest.mark.parametrize("player", [0, 3, -1])
    def test_perspective_for_unknown_player(self, player):
        """Unknown player ids raise ValueError."""
        with pytest.raises(ValueError, match="Unknown player"):
            perspective_for(player)

    @pytest.mark.parametrize("perspective", [1, -1])
    def test_validate_accepts_signs(self, perspective):
        """+1 and -1 pass through unchanged."""
        assert validate_perspective(perspective) == perspective

    @pytest.mark.parametrize("perspective", [0, 2, -2])
    def test_validate_rejects_others(self, perspective):
        """Anything else raises ValueError."""
        with pytest.raises(ValueError):
            validate_perspective(perspective)


class TestFlag:
    """Flag enum tests."""

    def test_three_distinct_flags(self):
        """EXACT, LOWER_BOUND and UPPER_BOUND are distinct."""
        assert len({Flag.EXACT, Flag.LOWER_BOUND, Flag.UPPER_BOUND}) == 3


class TestEvaluationEntry:
    """EvaluationEntry record tests."""

    def test_fields(self):
        """Fields are stored as given."""
        move = Move(take=1)
        entry = EvaluationEntry(3, 0.5, Flag.LOWER_BOUND, move)
        assert entry.depth == 3
        assert entry.result == 0.5
        assert entry.flag is Flag.LOWER_BOUND
        assert entry.move is move

    def test_move_defaults_to_none(self):
        """Leaf entries carry no move."""
        assert EvaluationEntry(0, 1.0, Flag.EXACT).move is None

    def test_is_exact(self):
        """is_exact reflects the flag."""
        assert EvaluationEntry(0, 0.0, Flag.EXACT).is_exact
        assert not EvaluationEntry(0, 0.0, Flag.UPPER_BOUND).is_exact

    def test_frozen(self):
        """Entries cannot be modified after creation."""
        entry = EvaluationEntry(1, 0.0, Flag.EXACT)
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.result = 2.0  # type: ignore[misc]

    def test_value_equality(self):
        """Entries compare by value."""
        assert EvaluationEntry(0, 1.0, Flag.EXACT, None) == EvaluationEntry(0, 1.0, Flag.EXACT)
