"""Marine Registry API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map MarineRegistryError to structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database and schema initialized on startup via the lifespan context manager
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from marine_registry.api.error_handlers import register_error_handlers
from marine_registry.api.routes import health, marine_species, taxonomies
from marine_registry.config import get_settings
from marine_registry.infrastructure.database import init_db
from marine_registry.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    await manager.create_schema()
    logger.info("Marine Registry API started")
    yield
    logger.info("Marine Registry API shutting down")
    await manager.close()


app = FastAPI(
    title="Marine Registry API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(taxonomies.router)
app.include_router(marine_species.router)

register_error_handlers(app)
