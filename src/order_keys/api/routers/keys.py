"""
order_keys.api.routers.keys

Key generation and reordering endpoints.

Responsibilities:
- Generate one key or a batch of keys between optional bounds.
- Validate a stored key.
- Compute keys for sibling inserts and moves.
"""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from order_keys.api.deps import reorder_service_dep, settings_dep
from order_keys.engine import (
    InvalidKey,
    OrderKeyError,
    generate_key_between,
    generate_n_keys_between,
    validate_order_key,
)
from order_keys.services.reorder_service import ReorderService
from order_keys.settings import Settings

router = APIRouter(prefix="/v1/keys", tags=["keys"])


class BetweenRequest(BaseModel):
    before: str | None = None
    after: str | None = None


class BatchRequest(BetweenRequest):
    count: int = Field(ge=0)


class ValidateRequest(BaseModel):
    key: str


class MoveRequest(BaseModel):
    siblings: list[str]
    from_index: int
    to_index: int


class InsertRequest(BaseModel):
    siblings: list[str] = Field(default_factory=list)
    index: int
    count: int = Field(default=1, ge=0)


class KeyResponse(BaseModel):
    key: str


class KeysResponse(BaseModel):
    keys: list[str]


class ValidateResponse(BaseModel):
    key: str
    valid: bool
    reason: str | None = None


@dataclass(eq=False)
class BatchTooLarge(OrderKeyError):
    """
    Raised when a batch request asks for more keys than `max_batch_size` allows.
    """

    count: int
    limit: int

    def __str__(self) -> str:
        return f"count {self.count} exceeds max_batch_size {self.limit}"


def _check_batch_size(count: int, settings: Settings) -> None:
    if count > settings.max_batch_size:
        raise BatchTooLarge(count, settings.max_batch_size)


@router.post("/between", response_model=KeyResponse)
async def key_between(body: BetweenRequest) -> KeyResponse:
    return KeyResponse(key=generate_key_between(body.before, body.after))


@router.post("/batch", response_model=KeysResponse)
async def keys_between(
    body: BatchRequest,
    settings: Settings = Depends(settings_dep),
) -> KeysResponse:
    _check_batch_size(body.count, settings)
    return KeysResponse(keys=generate_n_keys_between(body.before, body.after, body.count))


@router.post("/validate", response_model=ValidateResponse)
async def validate_key(body: ValidateRequest) -> ValidateResponse:
    try:
        validate_order_key(body.key)
    except InvalidKey as e:
        return ValidateResponse(key=body.key, valid=False, reason=e.reason)
    return ValidateResponse(key=body.key, valid=True)


@router.post("/insert", response_model=KeysResponse)
async def insert_keys(
    body: InsertRequest,
    settings: Settings = Depends(settings_dep),
    svc: ReorderService = Depends(reorder_service_dep),
) -> KeysResponse:
    _check_batch_size(body.count, settings)
    keys = svc.keys_for_insert(siblings=body.siblings, index=body.index, count=body.count)
    return KeysResponse(keys=keys)


@router.post("/move", response_model=KeyResponse)
async def move_key(
    body: MoveRequest,
    svc: ReorderService = Depends(reorder_service_dep),
) -> KeyResponse:
    key = svc.key_for_move(
        siblings=body.siblings, from_index=body.from_index, to_index=body.to_index
    )
    return KeyResponse(key=key)


# --- Module Notes -----------------------------------------------------------
# `OrderKeyError` raised by the engine/service propagates to the handler registered
# in `order_keys.api.app`, which answers 422 with the error class name.
