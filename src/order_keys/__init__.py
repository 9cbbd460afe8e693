"""
order_keys

Top-level package for the fractional-indexing order-key library.

Responsibilities:
- Expose package version metadata.
- Re-export the engine's public surface for library callers.
"""

from order_keys.engine import (
    INTEGER_ZERO,
    SMALLEST_INTEGER,
    InvalidKey,
    OrderKey,
    OrderKeyError,
    OrderViolation,
    generate_key_between,
    generate_n_keys_between,
    is_valid_order_key,
    validate_order_key,
)

__all__ = [
    "INTEGER_ZERO",
    "SMALLEST_INTEGER",
    "InvalidKey",
    "OrderKey",
    "OrderKeyError",
    "OrderViolation",
    "__version__",
    "generate_key_between",
    "generate_n_keys_between",
    "is_valid_order_key",
    "validate_order_key",
]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# The engine package has no third-party imports, so importing the top-level package
# stays cheap for callers that never touch the service or API layers.
