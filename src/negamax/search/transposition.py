"""Transposition table keyed by game state hash.

Entries are EvaluationEntry records. Storing under an existing key
overwrites it. The table is unbounded unless `max_entries` is given, in
which case the least-recently-inserted entry is evicted to make room.
"""

from __future__ import annotations

from collections import OrderedDict
from typing import Optional

from negamax.core.types import EvaluationEntry


class TranspositionTable:
    """State hash -> EvaluationEntry cache owned by a single engine.

    Hash collisions are not detected: two different states sharing a hash
    share an entry.
    """

    def __init__(self, max_entries: Optional[int] = None) -> None:
        """Initialize the transposition table.

        Args:
            max_entries: Maximum number of entries before eviction,
                or None for no limit.
        """
        if max_entries is not None and max_entries < 1:
            raise ValueError(f"max_entries must be at least 1, got {max_entries}")
        self._table: OrderedDict[int, EvaluationEntry] = OrderedDict()
        self.max_entries = max_entries
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    @property
    def bounded(self) -> bool:
        return self.max_entries is not None

    def get(self, key: int) -> Optional[EvaluationEntry]:
        """Look up an entry.

        Args:
            key: State hash

        Returns:
            The stored entry if found, None otherwise
        """
        entry = self._table.get(key)
        if entry is None:
            self.misses += 1
        else:
            self.hits += 1
        return entry

    def store(self, key: int, entry: EvaluationEntry) -> None:
        """Insert or overwrite an entry, evicting the oldest if at capacity.

        Args:
            key: State hash
            entry: Search result for that state
        """
        if key in self._table:
            # Overwrite counts as a fresh insertion
            del self._table[key]
        elif self.max_entries is not None and len(self._table) >= self.max_entries:
            self._table.popitem(last=False)
            self.evictions += 1
        self._table[key] = entry

    def __contains__(self, key: int) -> bool:
        return key in self._table

    def __len__(self) -> int:
        return len(self._table)

    def clear(self) -> None:
        """Clear all entries and reset stats."""
        self._table.clear()
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def stats(self) -> dict:
        """Return usage statistics.

        Returns:
            Dictionary with entries, max_entries, hits, misses, evictions
            and hit_rate.
        """
        total_lookups = self.hits + self.misses
        hit_rate = self.hits / total_lookups if total_lookups > 0 else 0.0
        return {
            "entries": len(self._table),
            "max_entries": self.max_entries,
            "hits": self.hits,
            "misses": self.misses,
            "evictions": self.evictions,
            "hit_rate": hit_rate,
        }
