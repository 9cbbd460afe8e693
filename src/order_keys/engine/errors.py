"""
order_keys.engine.errors

Domain-specific exceptions raised by the order-key engine.

Responsibilities:
- Signal malformed keys (`InvalidKey`).
- Signal bounds supplied in the wrong order (`OrderViolation`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class OrderKeyError(ValueError):
    """
    Base class for every error the engine and the reordering service raise.
    """


@dataclass(eq=False)
class InvalidKey(OrderKeyError):
    """
    Raised when a supplied key (or integer part) fails structural validation.
    """

    key: Any
    reason: str

    def __str__(self) -> str:
        return f"invalid order key {self.key!r}: {self.reason}"


@dataclass(eq=False)
class OrderViolation(OrderKeyError):
    """
    Raised when a lower bound is not strictly below its upper bound.
    """

    lower: str
    upper: str

    def __str__(self) -> str:
        return f"bounds out of order: {self.lower!r} >= {self.upper!r}"


# --- Module Notes -----------------------------------------------------------
# Both kinds are programmer errors: bounds are expected to be keys this engine produced.
# The API layer maps `OrderKeyError` to HTTP 422 (see `order_keys.api.app`).
