"""A hash set of strings using separate chaining."""

from __future__ import annotations

from hashoff.hashing import HashFunction


class ChainedHashTable:
    """A set of strings stored in buckets chosen by a hash function."""

    def __init__(self, hash_fn: HashFunction) -> None:
        self._hash_fn = hash_fn
        self._buckets: list[list[str]] = [[] for _ in range(hash_fn.num_slots)]
        self._size = 0

    def _bucket(self, key: str) -> list[str]:
        return self._buckets[self._hash_fn(key)]

    def insert(self, key: str) -> bool:
        """Add key; return whether it was not already present."""
        bucket = self._bucket(key)
        if key in bucket:
            return False
        bucket.append(key)
        self._size += 1
        return True

    def contains(self, key: str) -> bool:
        """Return whether key is in the table."""
        return key in self._bucket(key)

    def remove(self, key: str) -> bool:
        """Remove key; return whether it was present."""
        bucket = self._bucket(key)
        try:
            bucket.remove(key)
        except ValueError:
            return False
        self._size -= 1
        return True

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains(key)