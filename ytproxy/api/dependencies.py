"""FastAPI dependencies for API routers."""

from fastapi import Request

from ytproxy.config import Settings
from ytproxy.rss.cache import FeedCache


def get_feed_cache(request: Request) -> FeedCache:
    """Dependency returning the feed cache created with the application.

    Returns:
        The FeedCache stored on ``app.state`` by ``create_app``
    """
    return request.app.state.feed_cache


def get_app_settings(request: Request) -> Settings:
    """Dependency returning the settings the application was built with."""
    return request.app.state.settings
