import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Callable

from fastapi import FastAPI

from src.app.api import posts
from src.app.api.errors import register_exception_handlers
from src.app.containers import API_MODULES, Container
from src.app.logging import configure_logging

logger = logging.getLogger(__name__)

# Type alias for lifespan context manager
LifespanType = Callable[[FastAPI], AsyncIterator[None]]


@asynccontextmanager
async def default_lifespan(app: FastAPI):
    """Default application lifespan manager - creates tables on startup, releases the pool on shutdown."""
    container: Container = app.state.container
    logger.info("Starting Blog API...")

    db = container.database()
    await db.create_tables()
    logger.info("Database initialized successfully")

    yield

    logger.info("Shutting down Blog API...")
    await db.dispose()


def create_app(container: Container, lifespan: LifespanType = default_lifespan) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        container: DI container providing settings, database and services.
        lifespan: Optional lifespan context manager. If not provided, uses default_lifespan.

    Returns:
        Configured FastAPI application.
    """
    container.wire(modules=API_MODULES)

    config = container.config()
    configure_logging(config.log_level)

    app = FastAPI(
        title=config.app_name,
        version=config.app_version,
        lifespan=lifespan,
    )

    # Attach container to app state for access in lifespan and routes
    app.state.container = container

    register_exception_handlers(app)
    app.include_router(posts.router)

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    return app

container = Container()
app = create_app(container=container)
