"""API routers for the YouTube RSS proxy."""

from ytproxy.api.routes_health import router as health_router
from ytproxy.api.routes_rss import router as rss_router

__all__ = [
    "health_router",
    "rss_router",
]
