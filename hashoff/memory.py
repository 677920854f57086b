"""Counts allocations and releases per type name to spot leaks."""

from __future__ import annotations

from collections import Counter


class AllocationTracker:
    """Records how many objects of each registered type are outstanding."""

    def __init__(self) -> None:
        self._counts: Counter[str] = Counter()
        self._registered: set[str] = set()

    def register(self, name: str) -> None:
        """Make a type name eligible for leak reports."""
        self._registered.add(name)

    def record_new(self, name: str) -> None:
        self._counts[name] += 1

    def record_delete(self, name: str) -> None:
        self._counts[name] -= 1

    def clear(self) -> None:
        """Reset all allocation counts."""
        self._counts.clear()

    def types_with_errors(self) -> dict[str, int]:
        """Return registered types whose allocations and releases do not balance."""
        return {
            name: self._counts[name]
            for name in sorted(self._registered)
            if self._counts[name] != 0
        }