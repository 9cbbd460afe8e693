"""
order_keys.engine.midpoint

Fraction-part midpoint construction.
"""

from __future__ import annotations

from order_keys.engine.digits import BASE, ZERO_DIGIT, digit_char, digit_value
from order_keys.engine.errors import InvalidKey, OrderViolation


def _char_at(s: str, i: int) -> str:
    # Missing positions of the lower bound read as the zero digit.
    return s[i] if i < len(s) else ZERO_DIGIT


def midpoint(a: str, b: str | None) -> str:
    """
    Shortest digit string strictly between `a` and `b` (None = no upper bound).

    Neither argument may end in the zero digit and `a` must sort below `b`.
    """

    if b is not None and a >= b:
        raise OrderViolation(a, b)
    for bound in (a, b):
        if bound is not None and bound.endswith(ZERO_DIGIT):
            raise InvalidKey(bound, "trailing zero digit")

    if b is not None:
        n = 0
        while _char_at(a, n) == b[n]:
            n += 1
        if n > 0:
            return b[:n] + midpoint(a[n:], b[n:])

    digit_a = digit_value(a[0]) if a else 0
    digit_b = digit_value(b[0]) if b is not None else BASE
    if digit_b - digit_a > 1:
        return digit_char((digit_a + digit_b) // 2)

    # Adjacent digits: go one level deeper.
    if b is not None and len(b) > 1:
        return b[0]
    return digit_char(digit_a) + midpoint(a[1:], None)


# --- Module Notes -----------------------------------------------------------
# The common-prefix loop always stops inside `b`: a valid `b` cannot be a zero-padded
# extension of `a` because it would then end in the zero digit.
