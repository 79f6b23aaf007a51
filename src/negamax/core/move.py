"""
Move - an open-ended attribute bag describing one game transition.

Games decide what a move carries (cells, heap indices, captured pieces...).
The search engine never looks inside a move; it only hands moves back to
the game that generated them.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterator, Mapping


class Move:
    """
    Named attributes attached to a single game transition.

    Attributes are write-once: a game fills them in while generating the
    move and never edits them afterwards.

        move = Move(row=1, col=2)
        move.set_attribute("player", 1)
        move.get_attribute("col")      # -> 2
        move.get_attribute("capture")  # -> None
    """

    __slots__ = ('_data',)

    def __init__(self, **attributes: Any):
        self._data: dict[str, Any] = dict(attributes)

    def set_attribute(self, name: str, value: Any) -> None:
        """Attach a value under `name`. Raises KeyError if already set."""
        if name in self._data:
            raise KeyError(f"Move attribute '{name}' is already set")
        self._data[name] = value

    def get_attribute(self, name: str, default: Any = None) -> Any:
        """Return the value for `name`, or `default` when it is absent."""
        return self._data.get(name, default)

    def has_attribute(self, name: str) -> bool:
        return name in self._data

    @property
    def attributes(self) -> Mapping[str, Any]:
        """Read-only view of all attributes."""
        return MappingProxyType(self._data)

    def __contains__(self, name: object) -> bool:
        return name in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Move):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self._data.items())
        return f"Move({args})"
