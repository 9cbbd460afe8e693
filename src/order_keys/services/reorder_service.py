"""
order_keys.services.reorder_service

Sibling-list reordering on top of the order-key engine.

Responsibilities:
- Validate an ascending list of sibling keys supplied by the caller.
- Compute keys for inserting new items at a sibling index.
- Compute the new key for an item moved from one sibling index to another.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from order_keys.engine import (
    OrderKey,
    OrderKeyError,
    OrderViolation,
    generate_key_between,
    generate_n_keys_between,
    validate_order_key,
)
from order_keys.observability.logging import get_logger, key_operation

log = get_logger(__name__)


@dataclass(eq=False)
class SiblingIndexError(OrderKeyError):
    """
    Raised when a sibling position falls outside the list it refers to.
    """

    index: int
    size: int

    def __str__(self) -> str:
        return f"sibling index {self.index} out of range for {self.size} siblings"


def _neighbours(siblings: Sequence[OrderKey], index: int) -> tuple[OrderKey | None, OrderKey | None]:
    before = siblings[index - 1] if index > 0 else None
    after = siblings[index] if index < len(siblings) else None
    return before, after


class ReorderService:
    """
    Works on the ordered keys of one collection (e.g. the cards of one column).

    `siblings` is always the caller's current, ascending list of stored keys.
    """

    def validate_siblings(self, *, siblings: Sequence[OrderKey]) -> None:
        previous: OrderKey | None = None
        for key in siblings:
            validate_order_key(key)
            if previous is not None and previous >= key:
                raise OrderViolation(previous, key)
            previous = key

    def seed(self, *, count: int) -> list[OrderKey]:
        with key_operation("seed", count=count):
            keys = generate_n_keys_between(None, None, count)
            log.info("keys_seeded")
        return keys

    def key_for_insert(self, *, siblings: Sequence[OrderKey], index: int) -> OrderKey:
        return self.keys_for_insert(siblings=siblings, index=index, count=1)[0]

    def keys_for_insert(
        self, *, siblings: Sequence[OrderKey], index: int, count: int
    ) -> list[OrderKey]:
        self.validate_siblings(siblings=siblings)
        if not 0 <= index <= len(siblings):
            raise SiblingIndexError(index, len(siblings))

        before, after = _neighbours(siblings, index)
        with key_operation("insert", size=len(siblings)):
            keys = generate_n_keys_between(before, after, count)
            log.info("keys_inserted", index=index, count=count)
        return keys

    def key_for_move(
        self, *, siblings: Sequence[OrderKey], from_index: int, to_index: int
    ) -> OrderKey:
        """
        New key for the item at `from_index` so it ends up at `to_index`.

        `to_index` is the item's position in the list after the move. A move onto
        the item's own position returns its current key unchanged.
        """

        self.validate_siblings(siblings=siblings)
        size = len(siblings)
        if not 0 <= from_index < size:
            raise SiblingIndexError(from_index, size)
        if not 0 <= to_index < size:
            raise SiblingIndexError(to_index, size)

        if from_index == to_index:
            return siblings[from_index]

        remaining = [*siblings[:from_index], *siblings[from_index + 1 :]]
        before, after = _neighbours(remaining, to_index)
        with key_operation("move", size=size):
            key = generate_key_between(before, after)
            log.info("key_moved", from_index=from_index, to_index=to_index)
        return key


# --- Module Notes -----------------------------------------------------------
# Only the moved item gets a new key; neighbours keep theirs, which is the point of
# fractional indexing.
