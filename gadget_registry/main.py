"""
FastAPI application entry point.
Challenge: Mount routes, middleware (Prometheus), storage lifecycle (open/close the database handle).
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from prometheus_client import make_asgi_app

from gadget_registry.config import get_settings
from gadget_registry.api.v1.router import api_router
from gadget_registry.cache.redis_client import close_redis
from gadget_registry.core.exceptions import GadgetError
from gadget_registry.core.logging_config import setup_logging
from gadget_registry.db.session import Database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: open the storage handle (and create tables if asked). Shutdown: close it and Redis."""
    settings = get_settings()
    database = Database(settings.database_url, echo=settings.debug)
    database.open()
    if settings.create_tables:
        await database.create_all()
    app.state.database = database
    logger.info("%s started", settings.app_name)
    try:
        yield
    finally:
        await close_redis()
        await database.close()


async def gadget_error_handler(request: Request, exc: GadgetError) -> PlainTextResponse:
    """Business-rule failures go back as plain text with the error's status."""
    return PlainTextResponse(exc.message, status_code=exc.status_code)


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level)
    app = FastAPI(
        title=settings.app_name,
        description="Gadget rental registry: list gadgets, rent them out, take them back.",
        version="1.0.0",
        lifespan=lifespan,
    )

    # CORS for frontend/API consumers
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(GadgetError, gadget_error_handler)

    # Prometheus metrics at /metrics
    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    app.include_router(api_router)

    return app


app = create_app()
