"""Championship Records API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ChampionshipApiError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - The database manager is created on startup and disposed on shutdown by the lifespan;
      handlers reach it only through app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - create_app() factory: tests build isolated apps with explicit Settings,
      `app` stays importable for `uvicorn championship_api.main:app`
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from championship_api.api.error_handlers import register_error_handlers
from championship_api.api.routes import health, users
from championship_api.config import Settings, get_settings
from championship_api.infrastructure.database import DatabaseSessionManager
from championship_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_schema:
        await db_manager.create_schema()
    app.state.db_manager = db_manager
    logger.info("Championship API started")
    try:
        yield
    finally:
        logger.info("Championship API shutting down")
        app.state.db_manager = None
        await db_manager.close()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application with its middleware, routes and error handlers."""
    settings = settings or get_settings()
    app = FastAPI(
        title="Championship Records API", version="1.0.0", lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db_manager = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(users.router)

    register_error_handlers(app)
    return app


app = create_app()
