"""In-process freshness cache for rendered RSS documents."""

import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass

from ytproxy.config import Settings, get_settings

from .feed import transform

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    """A rendered document and the clock reading when it was built."""

    document: str
    fetched_at: float


class FeedCache:
    """Mapping from channel id to the last rendered RSS document.

    Lives for the lifetime of the process. There is no eviction and no size
    bound; an entry older than ``ttl_seconds`` is simply not returned and gets
    replaced by the next ``put`` for that channel. All access goes through a
    lock so the mapping stays consistent under threaded servers.
    """

    def __init__(
        self, ttl_seconds: float = 3600, clock: Callable[[], float] = time.monotonic
    ):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def now(self) -> float:
        return self._clock()

    def get(self, channel_id: str) -> CacheEntry | None:
        """Return the entry for ``channel_id`` if it is still fresh."""
        now = self.now()
        with self._lock:
            entry = self._entries.get(channel_id)
        if entry is None or now - entry.fetched_at >= self.ttl_seconds:
            return None
        return entry

    def put(
        self, channel_id: str, document: str, fetched_at: float | None = None
    ) -> CacheEntry:
        """Store ``document`` for ``channel_id``, replacing any previous entry."""
        entry = CacheEntry(
            document=document,
            fetched_at=self.now() if fetched_at is None else fetched_at,
        )
        with self._lock:
            self._entries[channel_id] = entry
        return entry

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


async def fetch_and_cache_feed(
    cache: FeedCache, channel_id: str, settings: Settings | None = None
) -> str:
    """
    Return the RSS document for a channel, building it on a cache miss.

    A fresh cached document is returned as-is without touching the upstream.
    Otherwise the feed is fetched and transformed, and the result replaces
    the cache entry. The timestamp is taken before the fetch starts.

    Args:
        cache: Process-wide feed cache
        channel_id: YouTube channel ID
        settings: Settings to use, defaults to the application settings

    Returns:
        Rendered RSS 2.0 document

    Raises:
        FetchError: If the upstream could not be fetched
        ParseError: If the upstream response is not a valid Atom feed
    """
    if cached := cache.get(channel_id):
        logger.debug(
            "Cache hit for channel %s",
            channel_id,
            extra={"channel_id": channel_id, "cache": "hit"},
        )
        return cached.document

    logger.debug(
        "Cache miss for channel %s",
        channel_id,
        extra={"channel_id": channel_id, "cache": "miss"},
    )
    started_at = cache.now()
    document = await transform(channel_id, settings or get_settings())
    cache.put(channel_id, document, fetched_at=started_at)
    return document
