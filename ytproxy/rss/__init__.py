"""RSS feed module for the YouTube RSS proxy."""

from .cache import CacheEntry, FeedCache, fetch_and_cache_feed
from .feed import transform
from .models import AtomFeed, FeedEntry

__all__ = [
    "AtomFeed",
    "CacheEntry",
    "FeedCache",
    "FeedEntry",
    "fetch_and_cache_feed",
    "transform",
]
