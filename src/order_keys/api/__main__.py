"""
order_keys.api.__main__

Entrypoint for running the API via `python -m order_keys.api`.

Responsibilities:
- Load settings, letting `--host` / `--port` override the env-driven values.
- Create the app.
- Start uvicorn with structlog-compatible logging config.
"""

from __future__ import annotations

import argparse

import uvicorn

from order_keys.api.app import create_app
from order_keys.observability.logging import get_logger
from order_keys.settings import Settings, get_settings

log = get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="order_keys.api", description="Serve the order-key API.")
    parser.add_argument("--host", default=None, help="bind address (default: ORDER_KEYS_API_HOST)")
    parser.add_argument("--port", type=int, default=None, help="port (default: ORDER_KEYS_API_PORT)")
    return parser.parse_args(argv)


def resolve_settings(args: argparse.Namespace) -> Settings:
    settings = get_settings()
    overrides = {
        field: value
        for field, value in (("api_host", args.host), ("api_port", args.port))
        if value is not None
    }
    return settings.model_copy(update=overrides) if overrides else settings


def main(argv: list[str] | None = None) -> None:
    settings = resolve_settings(parse_args(argv))
    app = create_app(settings=settings)
    log.info("serving", host=settings.api_host, port=settings.api_port)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()
