"""
order_keys.api.app

FastAPI app factory for the order-key service.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Map engine errors to HTTP responses.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from order_keys import __version__
from order_keys.api.routers.health import router as health_router
from order_keys.api.routers.keys import router as keys_router
from order_keys.engine import OrderKeyError
from order_keys.observability.logging import configure_logging, get_logger
from order_keys.observability.middleware import RequestContextMiddleware
from order_keys.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    app = FastAPI(
        title="Order Keys",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
    )
    app.state.settings = settings

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(keys_router)

    @app.exception_handler(OrderKeyError)
    async def _order_key_error(_: Request, exc: OrderKeyError) -> JSONResponse:
        # Bad bounds are caller bugs; report them, never substitute a nearby key.
        log.warning("order_key_rejected", error=type(exc).__name__, detail=str(exc))
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc), "error": type(exc).__name__},
        )

    log.info("app_created", env=settings.env)
    return app


# --- Module Notes -----------------------------------------------------------
# App composition stays here; key logic stays in the engine and service layers.
