"""FastAPI application factory.

All API endpoints are versioned under /api/v1/. The health check endpoint
remains unversioned at /health.

The data store is initialized during startup; if seeding fails the
application does not start serving.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from starlette.concurrency import run_in_threadpool

from chat import __version__
from chat.application.store import DataStore
from chat.presentation.api.exception_handlers import setup_exception_handlers
from chat.presentation.api.routers import store_router
from chat.presentation.api.schemas import HealthResponse
from chat.presentation.logging_config import configure_logging
from chat_config import get_settings

logger = logging.getLogger(__name__)

API_V1_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting chat API v%s...", __version__)
    store = await run_in_threadpool(DataStore.get_instance)
    logger.info(
        "Data store ready: %d users, %d conversations, %d messages",
        len(store.get_all_users_by_id()),
        len(store.get_all_conversations()),
        len(store.get_all_messages()),
    )
    yield
    logger.info("Shutting down chat API...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    configure_logging()
    settings = get_settings()

    app = FastAPI(
        title=f"{settings.app_name} API",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )
    setup_exception_handlers(app)

    app.include_router(store_router, prefix=API_V1_PREFIX, tags=["Store"])

    @app.get("/health", tags=["Health"])
    def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__)

    return app


def run() -> None:
    """Serve the API with uvicorn using the configured host and port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "chat.presentation.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
    )
