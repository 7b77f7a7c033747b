"""YouTube RSS Proxy - Main application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware

from ytproxy import __version__
from ytproxy.api import health_router, rss_router
from ytproxy.config import Settings, get_settings
from ytproxy.logging import setup_logging
from ytproxy.rss.cache import FeedCache

logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware to add security headers to all responses."""

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        # Prevent MIME type sniffing
        response.headers["X-Content-Type-Options"] = "nosniff"

        # Responses are feeds and plaintext, never meant to be framed
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    setup_logging(app.state.settings)
    logger.info(
        "Feed cache ready, ttl=%ss", app.state.feed_cache.ttl_seconds
    )
    yield
    # The cache is process-local and simply dropped on shutdown
    app.state.feed_cache.clear()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title="YouTube RSS Proxy",
        description="Serve YouTube channel Atom feeds as RSS 2.0 with media thumbnails",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.feed_cache = FeedCache(ttl_seconds=settings.cache_ttl_seconds)

    # Add security headers middleware
    app.add_middleware(SecurityHeadersMiddleware)

    # Include routers
    app.include_router(health_router)
    app.include_router(rss_router)

    return app


app = create_app()


def main():
    """Entry point for running the application."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    main()
