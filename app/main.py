"""
Main FastAPI application.

This is the entry point for the server. create_app() wires together:
- the database engine (one per process, built in the lifespan)
- routers
- error handlers
- middleware (request logging, security headers)
- templates and static files

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles

from app.core.config import Settings, get_settings
from app.core.logging import configure_logging
from app.core.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware
from app.db.session import create_engine_from_settings, create_session_maker
from app.routers import health
from app.ui.errors import register_error_handlers
from app.ui.routes import lists as ui_lists
from app.ui.templating import create_templates

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use; loaded from the environment when omitted.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or get_settings()
    configure_logging(level=settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Lifespan context manager for the FastAPI app.

        On startup the engine (and its connection pool) is created and the
        session maker is handed to request dependencies through app.state.
        On shutdown the pool is closed.
        """
        logger.info("Starting %s...", settings.APP_NAME)
        engine = create_engine_from_settings(settings)
        app.state.session_maker = create_session_maker(engine)
        try:
            yield
        finally:
            await engine.dispose()
            logger.info("Shutting down %s...", settings.APP_NAME)

    app = FastAPI(
        title=settings.APP_NAME,
        description="Named lists, managed through htmx fragments",
        version=settings.VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.templates = create_templates(settings.TEMPLATES_DIR)

    # --- Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routes ---
    app.mount("/static", StaticFiles(directory=settings.STATIC_DIR), name="static")
    app.include_router(health.router, tags=["Health"])
    app.include_router(ui_lists.router, tags=["Lists"])

    @app.get("/", include_in_schema=False)
    async def root():
        """Root endpoint - redirects to the lists page."""
        return RedirectResponse(url="/lists", status_code=307)

    return app


app = create_app()


def run() -> None:
    """Serve the app with uvicorn on HOST:PORT."""
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
    )
