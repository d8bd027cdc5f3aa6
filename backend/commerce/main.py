"""Commerce API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CommerceError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Module routes mounted under settings.api_prefix; health stays at the root for probes
    - create_schema_on_startup replaces migrations: the schema is small and append-only
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from commerce.api.error_handlers import register_error_handlers
from commerce.api.routes import catalog, clients, health, payments, products
from commerce.config import Settings, get_settings
from commerce.infrastructure.database import close_db, init_db
from commerce.infrastructure.observability import setup_logging
from commerce.infrastructure.seed import seed_sample_data

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
        echo=settings.database_echo,
    )
    if settings.create_schema_on_startup:
        await manager.create_schema()
        logger.info("Database schema ensured")
    if settings.seed_sample_data:
        async with manager.session() as db:
            await seed_sample_data(db)
    logger.info(
        f"Commerce API started ({settings.environment})",
    )
    yield
    logger.info("Commerce API shutting down")
    await close_db()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title="Commerce API",
        version=settings.service_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes - explicit registration
    app.include_router(health.router)
    for module in (clients, products, catalog, payments):
        app.include_router(module.router, prefix=settings.api_prefix)

    register_error_handlers(app)
    return app


app = create_app()
