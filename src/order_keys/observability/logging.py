"""
order_keys.observability.logging

Structured logging configuration.

Responsibilities:
- Configure `structlog` for JSON logs.
- Provide a small wrapper for obtaining bound loggers.
- Bind key-operation context (operation name, sibling count) for the duration of a call.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog


def configure_logging(*, service_name: str, level: str) -> None:
    """
    JSON logs on stdout; stdlib level filtering applies before rendering.
    """

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _add_service_name(service_name),
            _drop_key_lists,
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _add_service_name(service_name: str):
    def processor(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor


def _drop_key_lists(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    # Sibling lists can hold thousands of keys; log their size, not their content.
    for field in ("siblings", "keys"):
        value = event_dict.get(field)
        if isinstance(value, (list, tuple)):
            event_dict[field] = len(value)
    return event_dict


@contextmanager
def key_operation(name: str, **fields: Any) -> Iterator[None]:
    """
    Bind `operation=name` (plus `fields`) to every log line emitted inside the block.
    """

    with structlog.contextvars.bound_contextvars(operation=name, **fields):
        yield


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


# --- Module Notes -----------------------------------------------------------
# Request-scoped fields come from `observability.middleware`; `key_operation` nests
# inside them, so a service call logged during a request carries both.
