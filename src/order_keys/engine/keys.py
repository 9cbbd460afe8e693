"""
order_keys.engine.keys

Order-key validation and generation.

Responsibilities:
- Validate full keys (integer part + fraction part) before they are used as bounds.
- Generate the shortest key strictly between two optional bounds.
- Generate balanced batches of keys between two optional bounds.
"""

from __future__ import annotations

from typing import Any

from order_keys.engine.digits import DIGIT_VALUES, INTEGER_ZERO, SMALLEST_INTEGER, ZERO_DIGIT
from order_keys.engine.errors import InvalidKey, OrderKeyError, OrderViolation
from order_keys.engine.integers import decrement_integer, get_integer_part, increment_integer
from order_keys.engine.midpoint import midpoint

# An integer part followed by a fraction part with no trailing zero digit.
OrderKey = str


def validate_order_key(key: Any) -> None:
    if not isinstance(key, str):
        raise InvalidKey(key, f"expected str, got {type(key).__name__}")
    if key == SMALLEST_INTEGER:
        raise InvalidKey(key, "reserved lower bound")
    for ch in key:
        if ch not in DIGIT_VALUES:
            raise InvalidKey(key, f"character {ch!r} is outside the key alphabet")
    int_part = get_integer_part(key)
    if key[len(int_part):].endswith(ZERO_DIGIT):
        raise InvalidKey(key, "fraction part ends in the zero digit")


def is_valid_order_key(key: Any) -> bool:
    try:
        validate_order_key(key)
    except OrderKeyError:
        return False
    return True


def split_order_key(key: OrderKey) -> tuple[str, str]:
    """
    Validate `key` and return its `(integer_part, fraction_part)`.
    """

    validate_order_key(key)
    int_part = get_integer_part(key)
    return int_part, key[len(int_part):]


def generate_key_between(a: OrderKey | None, b: OrderKey | None) -> OrderKey:
    """
    Shortest key strictly between `a` and `b`.

    `None` means "no bound" on that side. Appending (b is None) or prepending
    (a is None) moves the integer part rather than growing the fraction part,
    so keys stay short under repeated inserts at either end.
    """

    if a is not None:
        validate_order_key(a)
    if b is not None:
        validate_order_key(b)
    if a is not None and b is not None and a >= b:
        raise OrderViolation(a, b)

    if a is None and b is None:
        return INTEGER_ZERO

    if a is None:
        ib, fb = split_order_key(b)
        if ib == SMALLEST_INTEGER:
            return ib + midpoint("", fb)
        if ib < b:
            return ib
        lower = decrement_integer(ib)
        if lower is None:
            # Only SMALLEST_INTEGER has no decrement and it was handled above.
            raise InvalidKey(b, "no integer part below this key")
        if lower == SMALLEST_INTEGER:
            # The floor itself is reserved; step into its fraction space instead.
            return lower + midpoint("", None)
        return lower

    ia, fa = split_order_key(a)
    if b is None:
        upper = increment_integer(ia)
        return ia + midpoint(fa, None) if upper is None else upper

    ib, fb = split_order_key(b)
    if ia == ib:
        return ia + midpoint(fa, fb)
    upper = increment_integer(ia)
    if upper is not None and upper < b:
        return upper
    return ia + midpoint(fa, None)


def generate_n_keys_between(a: OrderKey | None, b: OrderKey | None, n: int) -> list[OrderKey]:
    """
    `n` ascending keys strictly between `a` and `b`.

    With both bounds present the range is split recursively around a pivot so
    key length grows with log(n) instead of n.
    """

    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if n == 0:
        return []
    if n == 1:
        return [generate_key_between(a, b)]

    if b is None:
        c = generate_key_between(a, None)
        result = [c]
        for _ in range(n - 1):
            c = generate_key_between(c, None)
            result.append(c)
        return result

    if a is None:
        c = generate_key_between(None, b)
        result = [c]
        for _ in range(n - 1):
            c = generate_key_between(None, c)
            result.append(c)
        # Built from the upper bound downwards.
        result.reverse()
        return result

    mid = n // 2
    c = generate_key_between(a, b)
    return [
        *generate_n_keys_between(a, c, mid),
        c,
        *generate_n_keys_between(c, b, n - mid - 1),
    ]


# --- Module Notes -----------------------------------------------------------
# Bounds are re-validated on every recursive call of `generate_n_keys_between`.
