"""Hash functions from strings to table slots."""

from __future__ import annotations

import random as _random
import re
from collections.abc import Callable

_STABLE_SEED = 137
_MASK32 = 0xFFFFFFFF
_LEADING_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


class HashFunction:
    """Maps string keys to a slot index in range(num_slots)."""

    __slots__ = ("num_slots", "_fn")

    def __init__(self, num_slots: int, fn: Callable[[str], int]) -> None:
        if num_slots <= 0:
            raise ValueError("A hash function needs at least one slot.")
        self.num_slots = num_slots
        self._fn = fn

    def __call__(self, key: str) -> int:
        return self._fn(key) % self.num_slots

    def __repr__(self) -> str:
        return f"HashFunction(num_slots={self.num_slots})"


def string_hash_code(text: str) -> int:
    """Return a deterministic 32-bit hash code for a string."""
    result = 5381
    for byte in text.encode("utf-8"):
        result = (result * 33 + byte) & _MASK32
    return result


def tabulation_hash(seed: int) -> Callable[[int], int]:
    """Return a tabulation hash over 32-bit keys using tables drawn from seed."""
    engine = _random.Random(seed & _MASK32)
    tables = [[engine.getrandbits(32) for _ in range(256)] for _ in range(4)]

    def scramble(key: int) -> int:
        key &= _MASK32
        result = 0
        for shift, table in enumerate(tables):
            result ^= table[(key >> (shift * 8)) & 0xFF]
        return result

    return scramble


def random_hash(num_slots: int, seed: int | None = None) -> HashFunction:
    """Return a randomly chosen hash function; a fixed seed makes it repeatable."""
    if seed is None:
        seed = _random.randint(0, 0x7FFFFFFF)
    scrambler = tabulation_hash(seed)
    return HashFunction(num_slots, lambda key: scrambler(string_hash_code(key)))


def consistent_random(num_slots: int) -> HashFunction:
    """Return a random-looking hash function that is the same on every run."""
    return random_hash(num_slots, _STABLE_SEED)


def zero(num_slots: int) -> HashFunction:
    """Return a hash function that sends every key to slot zero."""
    return constant(num_slots, 0)


def constant(num_slots: int, value: int) -> HashFunction:
    """Return a hash function that sends every key to the same slot."""
    return HashFunction(num_slots, lambda _key: value)


def _leading_integer(text: str) -> int:
    match = _LEADING_INTEGER.match(text)
    return int(match.group(1)) if match else 0


def identity(num_slots: int) -> HashFunction:
    """Treat the key as a base-10 integer; keys that are not numbers hash to zero."""
    return HashFunction(num_slots, _leading_integer)