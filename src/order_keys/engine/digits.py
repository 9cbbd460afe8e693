"""
order_keys.engine.digits

Alphabet and reserved constants shared by the engine.

Responsibilities:
- Define the ordered digit alphabet and its char <-> value lookup.
- Define the reserved integer constants (`INTEGER_ZERO`, `SMALLEST_INTEGER`).
"""

from __future__ import annotations

# Ascending code-point order, so plain str comparison agrees with digit values.
DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
BASE = len(DIGITS)
DIGIT_VALUES: dict[str, int] = {ch: value for value, ch in enumerate(DIGITS)}

ZERO_DIGIT = DIGITS[0]
MAX_DIGIT = DIGITS[-1]

INTEGER_ZERO = "a0"
# Head "A" implies a 27 character integer part; this is its lowest value.
SMALLEST_INTEGER = "A" + ZERO_DIGIT * 26


def digit_value(ch: str) -> int:
    return DIGIT_VALUES[ch]


def digit_char(value: int) -> str:
    return DIGITS[value]


# --- Module Notes -----------------------------------------------------------
# Every module that does digit arithmetic goes through this lookup rather than
# scanning DIGITS, so the alphabet is defined in exactly one place.
