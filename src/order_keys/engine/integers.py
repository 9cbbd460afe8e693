"""
order_keys.engine.integers

Integer-part arithmetic for order keys.

Responsibilities:
- Decode the integer-part length from its head character.
- Validate integer parts and slice them off full keys.
- Increment / decrement integer parts in base 62, moving the head when the
  digits carry or borrow out.
"""

from __future__ import annotations

from order_keys.engine.digits import (
    BASE,
    INTEGER_ZERO,
    MAX_DIGIT,
    ZERO_DIGIT,
    digit_char,
    digit_value,
)
from order_keys.engine.errors import InvalidKey


def integer_length(head: str) -> int:
    """
    Total integer-part length (head included) implied by `head`.

    Lowercase heads grow upwards from "a" (length 2); uppercase heads grow
    downwards from "Z" (length 2).
    """

    if len(head) == 1 and "a" <= head <= "z":
        return ord(head) - ord("a") + 2
    if len(head) == 1 and "A" <= head <= "Z":
        return ord("Z") - ord(head) + 2
    raise InvalidKey(head, "head must be a single character in A-Z or a-z")


def validate_integer(int_part: str) -> None:
    if not int_part:
        raise InvalidKey(int_part, "empty integer part")
    if len(int_part) != integer_length(int_part[0]):
        raise InvalidKey(int_part, "integer part length does not match its head")


def get_integer_part(key: str) -> str:
    if not key:
        raise InvalidKey(key, "empty key")
    length = integer_length(key[0])
    if length > len(key):
        raise InvalidKey(key, f"head {key[0]!r} needs {length} characters")
    return key[:length]


def increment_integer(x: str) -> str | None:
    """
    Next integer after `x`, or None when `x` is the largest representable one.
    """

    validate_integer(x)
    head, digits = x[0], list(x[1:])
    carry = True
    for i in range(len(digits) - 1, -1, -1):
        value = digit_value(digits[i]) + 1
        if value == BASE:
            digits[i] = ZERO_DIGIT
        else:
            digits[i] = digit_char(value)
            carry = False
            break

    if not carry:
        return head + "".join(digits)
    if head == "Z":
        return INTEGER_ZERO
    if head == "z":
        return None

    new_head = chr(ord(head) + 1)
    if new_head > "a":
        digits.append(ZERO_DIGIT)
    else:
        digits.pop()
    return new_head + "".join(digits)


def decrement_integer(x: str) -> str | None:
    """
    Integer immediately below `x`, or None when `x` is `SMALLEST_INTEGER`.
    """

    validate_integer(x)
    head, digits = x[0], list(x[1:])
    borrow = True
    for i in range(len(digits) - 1, -1, -1):
        value = digit_value(digits[i]) - 1
        if value == -1:
            digits[i] = MAX_DIGIT
        else:
            digits[i] = digit_char(value)
            borrow = False
            break

    if not borrow:
        return head + "".join(digits)
    if head == "a":
        return "Z" + MAX_DIGIT
    if head == "A":
        return None

    new_head = chr(ord(head) - 1)
    if new_head < "Z":
        digits.append(MAX_DIGIT)
    else:
        digits.pop()
    return new_head + "".join(digits)


# --- Module Notes -----------------------------------------------------------
# Crossing between the two head ranges happens only at "Zz" <-> "a0"; every other head
# change keeps the length implied by the new head (see `integer_length`).
