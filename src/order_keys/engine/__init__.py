"""
order_keys.engine

Order-key engine package.

Responsibilities:
- Generate, validate and order fractional-index key strings.
- Stay pure: no I/O, no logging, no shared mutable state.
"""

from order_keys.engine.digits import INTEGER_ZERO, SMALLEST_INTEGER
from order_keys.engine.errors import InvalidKey, OrderKeyError, OrderViolation
from order_keys.engine.keys import (
    OrderKey,
    generate_key_between,
    generate_n_keys_between,
    is_valid_order_key,
    split_order_key,
    validate_order_key,
)

__all__ = [
    "INTEGER_ZERO",
    "SMALLEST_INTEGER",
    "InvalidKey",
    "OrderKey",
    "OrderKeyError",
    "OrderViolation",
    "generate_key_between",
    "generate_n_keys_between",
    "is_valid_order_key",
    "split_order_key",
    "validate_order_key",
]


# --- Module Notes -----------------------------------------------------------
# Callers above this package (services, API) own logging and request context.
