"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- Database schema creation and engine shutdown

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from bookapi.core.config import settings
from bookapi.core.db import dispose_engine, init_db
from bookapi.infrastructure.books.seed import seed_sample_books
from bookapi.interfaces.books.dependencies import get_book_repository
from bookapi.interfaces.books.router import router as books_router
from bookapi.interfaces.health import router as health_router
from bookapi.shared.errors.handlers import register_error_handlers
from bookapi.shared.logging import configure_logging
from bookapi.shared.security.headers import SecurityHeadersMiddleware
from bookapi.shared.security.rate_limiting import (
    limiter,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: prepare the store on startup, release it on shutdown."""
    if settings.repository_backend == "sql":
        await init_db()

    if settings.seed_sample_data:
        await seed_sample_books(get_book_repository())

    logger.info(
        "%s %s started (backend=%s)",
        settings.project_name,
        settings.version,
        settings.repository_backend,
    )

    yield

    await dispose_engine()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=settings.api_prefix)
    app.include_router(books_router, prefix=settings.api_prefix)

    return app


app = create_app()
