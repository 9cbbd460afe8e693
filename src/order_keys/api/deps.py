"""
order_keys.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for settings and the reordering service.
"""

from __future__ import annotations

from fastapi import Request

from order_keys.services.reorder_service import ReorderService
from order_keys.settings import Settings


def settings_dep(request: Request) -> Settings:
    # Settings are attached in `order_keys.api.app.create_app`.
    return request.app.state.settings  # type: ignore[attr-defined]


def reorder_service_dep() -> ReorderService:
    return ReorderService()
