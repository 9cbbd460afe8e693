"""
tests.test_integers

Integer-part arithmetic.

Responsibilities:
- Pin head decoding and carry/borrow transitions across head ranges.
- Check increment/decrement are exact inverses.
"""

from __future__ import annotations

import pytest

from order_keys.engine import SMALLEST_INTEGER, InvalidKey
from order_keys.engine.integers import (
    decrement_integer,
    get_integer_part,
    increment_integer,
    integer_length,
    validate_integer,
)


@pytest.mark.parametrize(
    ("head", "length"),
    [("a", 2), ("b", 3), ("z", 27), ("Z", 2), ("Y", 3), ("A", 27)],
)
def test_integer_length(head: str, length: int) -> None:
    assert integer_length(head) == length


@pytest.mark.parametrize("head", ["0", "9", "", "ab", "-"])
def test_integer_length_rejects_bad_head(head: str) -> None:
    with pytest.raises(InvalidKey):
        integer_length(head)


def test_validate_integer() -> None:
    validate_integer("a0")
    validate_integer("b00")
    validate_integer(SMALLEST_INTEGER)
    with pytest.raises(InvalidKey):
        validate_integer("b0")
    with pytest.raises(InvalidKey):
        validate_integer("a00")
    with pytest.raises(InvalidKey):
        validate_integer("")


def test_get_integer_part() -> None:
    assert get_integer_part("a0") == "a0"
    assert get_integer_part("a0V") == "a0"
    assert get_integer_part("b12x") == "b12"
    with pytest.raises(InvalidKey):
        get_integer_part("b1")


@pytest.mark.parametrize(
    ("x", "expected"),
    [
        ("a0", "a1"),
        ("a9", "aA"),
        ("aZ", "aa"),
        ("ay", "az"),
        ("az", "b00"),
        ("b0z", "b10"),
        ("Zy", "Zz"),
        ("Zz", "a0"),
        ("Yzz", "Z0"),
        (SMALLEST_INTEGER, "A" + "0" * 25 + "1"),
        ("A" + "z" * 26, "B" + "0" * 25),
    ],
)
def test_increment_integer(x: str, expected: str) -> None:
    assert increment_integer(x) == expected


def test_increment_largest_integer_is_undefined() -> None:
    assert increment_integer("z" * 27) is None


@pytest.mark.parametrize(
    ("x", "expected"),
    [
        ("a1", "a0"),
        ("a0", "Zz"),
        ("b00", "az"),
        ("Z0", "Yzz"),
        ("Zz", "Zy"),
        ("B" + "0" * 25, "A" + "z" * 26),
    ],
)
def test_decrement_integer(x: str, expected: str) -> None:
    assert decrement_integer(x) == expected


def test_decrement_smallest_integer_is_undefined() -> None:
    assert decrement_integer(SMALLEST_INTEGER) is None


@pytest.mark.parametrize(
    "x",
    [
        "a0",
        "az",
        "b00",
        "bzz",
        "Zz",
        "Z0",
        "Yzz",
        "y" + "z" * 25,
        "z" + "0" * 26,
        "B" + "0" * 25,
        SMALLEST_INTEGER,
    ],
)
def test_increment_then_decrement_round_trips(x: str) -> None:
    up = increment_integer(x)
    assert up is not None
    assert x < up
    assert decrement_integer(up) == x


@pytest.mark.parametrize(
    "x",
    ["a0", "a1", "b00", "Zz", "Z0", "Yzz", "z" * 27, "B" + "0" * 25],
)
def test_decrement_then_increment_round_trips(x: str) -> None:
    down = decrement_integer(x)
    assert down is not None
    assert down < x
    assert increment_integer(down) == x


def test_increment_walks_across_head_boundaries_in_order() -> None:
    x = "Yzy"
    seen = [x]
    for _ in range(200):
        nxt = increment_integer(x)
        assert nxt is not None
        seen.append(nxt)
        x = nxt
    assert seen == sorted(seen)
    assert len(set(seen)) == len(seen)
    assert "a0" in seen and "Zz" in seen
