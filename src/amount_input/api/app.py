"""FastAPI application factory."""
from __future__ import annotations
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from ..config import Settings
from ..utils.logging import get_logger, setup_logging
from .middleware import RequestLoggingMiddleware
from .routes import amounts, health, locales

logger = get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level)
        logger.info("amount_input_api_started", default_locale=settings.default_locale,
                    enable_expressions=settings.enable_expressions)
        yield

    app = FastAPI(
        title="Amount Input API",
        description="Locale-aware parsing, formatting and keystroke synchronization of amounts",
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    # Store settings in app state
    app.state.settings = settings

    # Register routes
    app.include_router(health.router, tags=["health"])
    app.include_router(locales.router, prefix="/locales", tags=["locales"])
    app.include_router(amounts.router, prefix="/amounts", tags=["amounts"])

    return app
