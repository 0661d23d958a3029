"""Price Resolver API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PriceServiceError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Schema creation + reference seed only when enabled in settings; migrated
      deployments rely on alembic
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from price_resolver import __version__
from price_resolver.api.error_handlers import register_error_handlers
from price_resolver.api.routes import health, prices
from price_resolver.config import get_settings
from price_resolver.infrastructure.database import init_db
from price_resolver.infrastructure.observability import setup_logging
from price_resolver.infrastructure.seed import seed_reference_prices

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
    if settings.create_schema_on_startup:
        await manager.create_schema()
    if settings.seed_reference_prices:
        async with manager.session() as db:
            await seed_reference_prices(db)
    logger.info("Price Resolver API started")
    yield
    logger.info("Price Resolver API shutting down")
    await manager.dispose()


app = FastAPI(
    title="Price Resolver API", version=__version__, lifespan=lifespan,
)

# CORS from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(prices.router)

register_error_handlers(app)
