# main.py
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional
import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.concurrency import run_in_threadpool
import uvicorn

from event_planner import __version__
from event_planner.api import (
    events_api_router,
    health_api_router,
    setup_exception_handlers,
    users_api_router,
)
from event_planner.core.config import Settings, get_settings
from event_planner.core.database import StorageConnector
from event_planner.core.exceptions import ConfigurationException
from event_planner.core.logging_config import configure_logging
from event_planner.models import Base

logger = logging.getLogger("EVENT_PLANNER")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Connect (with retries) and ensure tables on startup; release the pool on shutdown."""
    connector: StorageConnector = app.state.connector
    configure_logging(connector.settings.log_level)

    await run_in_threadpool(connector.connect)
    await run_in_threadpool(Base.metadata.create_all, bind=connector.engine)
    logger.info("Database tables ensured")
    yield

    logger.info("Shutting down Event Planner API...")
    connector.shutdown()


def create_app(
    settings: Optional[Settings] = None,
    connector: Optional[StorageConnector] = None,
) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.connector = connector or StorageConnector(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(users_api_router)
    app.include_router(events_api_router)
    app.include_router(health_api_router)

    return app


app = create_app()


def run() -> None:
    """Serve the API; SIGINT/SIGTERM drain in-flight requests before the pool is released."""
    load_dotenv()
    get_settings.cache_clear()
    settings = get_settings()
    if settings.port is None:
        raise ConfigurationException("PORT is not configured")

    configure_logging(settings.log_level)
    logger.info(f"Server running on port {settings.port}")
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        timeout_graceful_shutdown=settings.shutdown_timeout,
    )


if __name__ == "__main__":
    run()
