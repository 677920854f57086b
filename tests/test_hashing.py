import pytest

from hashoff.hashing import (
    HashFunction,
    consistent_random,
    constant,
    identity,
    random_hash,
    string_hash_code,
    tabulation_hash,
    zero,
)

WORDS = ["apple", "banana", "cherry", "", "137", "Zebra", "zebra"]


@pytest.mark.parametrize("slots", [0, -5])
def test_hash_function_rejects_non_positive_slots(slots):
    with pytest.raises(ValueError):
        HashFunction(slots, lambda key: 0)


def test_hash_function_reduces_into_range():
    fn = HashFunction(7, len)
    assert fn.num_slots == 7
    assert fn("abcdefghij") == len("abcdefghij") % 7


def test_identity_uses_last_digit():
    fn = identity(10)
    assert fn("137") == 7
    assert fn("4") == 4


def test_identity_non_numbers_hash_to_zero():
    fn = identity(10)
    assert fn("hello") == 0
    assert fn("") == 0


def test_identity_parses_leading_number():
    fn = identity(10)
    assert fn("  42xyz") == fn("42")
    assert fn("+9") == 9


def test_zero_and_constant():
    assert all(zero(10)(word) == 0 for word in WORDS)
    assert all(constant(10, 3)(word) == 3 for word in WORDS)
    assert constant(10, 13)("x") == 3


def test_string_hash_code_is_deterministic_and_32_bit():
    for word in WORDS:
        code = string_hash_code(word)
        assert code == string_hash_code(word)
        assert 0 <= code < 2**32
    assert string_hash_code("zebra") != string_hash_code("Zebra")


def test_tabulation_hash_same_seed_same_function():
    first = tabulation_hash(99)
    second = tabulation_hash(99)
    keys = [0, 1, 255, 256, 2**32 - 1, 123456789]
    assert [first(k) for k in keys] == [second(k) for k in keys]
    assert all(0 <= first(k) < 2**32 for k in keys)


def test_tabulation_hash_of_zero_xors_first_entries():
    scramble = tabulation_hash(7)
    # Keys differing only above 32 bits are the same key.
    assert scramble(2**32) == scramble(0)


def test_random_hash_with_seed_is_repeatable():
    first = random_hash(101, seed=12)
    second = random_hash(101, seed=12)
    assert [first(w) for w in WORDS] == [second(w) for w in WORDS]
    assert all(0 <= first(w) < 101 for w in WORDS)


def test_random_hash_without_seed_stays_in_range():
    fn = random_hash(13)
    assert all(0 <= fn(w) < 13 for w in WORDS)


def test_consistent_random_is_consistent():
    first = consistent_random(50)
    second = consistent_random(50)
    assert [first(w) for w in WORDS] == [second(w) for w in WORDS]