"""
Tests for negamax.core.move

Tests the Move attribute bag.
"""

import pytest

from negamax.core.move import Move


class TestConstruction:
    """Move construction tests."""

    def test_keyword_attributes(self):
        """Keyword arguments become attributes."""
        move = Move(row=1, col=2)
        assert move.get_attribute("row") == 1
        assert move.get_attribute("col") == 2

    def test_empty_move(self):
        """A move may carry no attributes."""
        move = Move()
        assert len(move) == 0


class TestGetAttribute:
    """get_attribute tests."""

    def test_missing_returns_none(self):
        """Absent attributes return None instead of raising."""
        assert Move(take=1).get_attribute("heap") is None

    def test_missing_returns_default(self):
        """Absent attributes return the supplied default."""
        assert Move().get_attribute("capture", default=-1) == -1

    def test_stored_none_is_returned(self):
        """A stored None is distinguishable via has_attribute."""
        move = Move(capture=None)
        assert move.get_attribute("capture", default=5) is None
        assert move.has_attribute("capture")

    def test_any_value_type(self):
        """Arbitrary values can be stored."""
        move = Move(path=[(0, 0), (1, 1)], promote="queen")
        assert move.get_attribute("path") == [(0, 0), (1, 1)]
        assert move.get_attribute("promote") == "queen"


class TestSetAttribute:
    """set_attribute tests."""

    def test_adds_new_attribute(self):
        """New names are stored."""
        move = Move(row=0)
        move.set_attribute("col", 2)
        assert move.get_attribute("col") == 2

    def test_existing_name_raises(self):
        """Attributes are write-once."""
        move = Move(row=0)
        with pytest.raises(KeyError):
            move.set_attribute("row", 1)
        assert move.get_attribute("row") == 0


class TestViews:
    """Container protocol tests."""

    def test_contains(self):
        """`in` checks attribute names."""
        move = Move(heap=0)
        assert "heap" in move
        assert "take" not in move

    def test_iter_and_len(self):
        """Iteration yields names in insertion order."""
        move = Move(a=1, b=2)
        move.set_attribute("c", 3)
        assert list(move) == ["a", "b", "c"]
        assert len(move) == 3

    def test_attributes_view_is_read_only(self):
        """The attributes mapping cannot be written through."""
        move = Move(heap=0)
        with pytest.raises(TypeError):
            move.attributes["heap"] = 1  # type: ignore[index]
        assert dict(move.attributes) == {"heap": 0}


class TestEquality:
    """Equality and hashing tests."""

    def test_equal_attributes_equal(self):
        """Moves with the same attributes compare equal."""
        assert Move(heap=0, take=2) == Move(take=2, heap=0)

    def test_different_attributes_not_equal(self):
        """Different attributes compare unequal."""
        assert Move(heap=0, take=1) != Move(heap=0, take=2)

    def test_not_equal_to_other_types(self):
        """Moves never equal non-moves."""
        assert Move(take=1) != {"take": 1}

    def test_unhashable(self):
        """Moves are unhashable since attributes can still be added."""
        with pytest.raises(TypeError):
            hash(Move(take=1))

    def test_repr(self):
        """repr lists attributes."""
        assert repr(Move(heap=0, take=2)) == "Move(heap=0, take=2)"
