"""
ASGI entry point for the signup service.

Builds the FastAPI app and mounts the v1 users router. The lifespan
owns the PostgreSQL pool: it is opened and migrated before the first
request and closed on shutdown.

Handlers that touch bcrypt or the pool are plain ``def`` functions so
FastAPI runs them in its worker threadpool instead of on the event loop.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import run_migrations
from src.api.v1 import router as v1_router
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

tags_metadata = [
    {
        "name": "v1",
        "description": "User Registration API v1 - Create and look up user accounts",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Configure logging, open and migrate the pool, close it on exit."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    logger.info("Opening PostgreSQL pool (max %d connections)", settings.pool_max_size)
    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
        timeout=settings.pool_timeout,
    )
    run_migrations(pool)

    # Read by get_pool() in src.api.dependencies
    app.state.pool = pool
    logger.info("signup ready")

    yield

    pool.close()
    logger.info("PostgreSQL pool closed")


app = FastAPI(
    title="signup",
    description="User Registration API - Validates, hashes and stores new user accounts",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

app.include_router(v1_router, prefix="/v1")


@app.get("/health")
def health_check(request: Request) -> dict[str, str]:
    """Report healthy once a pooled connection answers ``SELECT 1``."""
    with request.app.state.pool.connection() as conn:
        conn.execute("SELECT 1")
    return {"status": "healthy"}


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    uvicorn.run("src.api.main:app", host="0.0.0.0", port=8000)
