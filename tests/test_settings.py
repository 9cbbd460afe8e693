"""
tests.test_settings

Env-driven configuration.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from order_keys.settings import Settings


def test_defaults() -> None:
    s = Settings()
    assert s.service_name == "order-keys"
    assert s.max_batch_size == 1000


def test_env_prefix(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ORDER_KEYS_MAX_BATCH_SIZE", "25")
    monkeypatch.setenv("ORDER_KEYS_ENV", "prod")
    s = Settings()
    assert s.max_batch_size == 25
    assert s.env == "prod"


def test_batch_size_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        Settings(max_batch_size=0)
