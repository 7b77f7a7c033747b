"""HTTP client for YouTube's public per-channel Atom feeds."""

import logging

import httpx

from ytproxy.errors import FetchError

logger = logging.getLogger(__name__)


class YouTubeFeedClient:
    """Client for fetching a channel's Atom feed from YouTube.

    No authentication is needed; the feed endpoint is public and keyed by
    channel id.
    """

    BASE = "https://www.youtube.com/feeds/videos.xml"

    def __init__(self, feed_url: str = BASE, timeout: float = 15):
        """Initialize the client.

        Args:
            feed_url: Feed endpoint, the channel id is passed as a query parameter
            timeout: Seconds to wait on the upstream before giving up
        """
        self._feed_url = feed_url
        self._timeout = timeout

    async def fetch_channel_feed(self, channel_id: str) -> bytes:
        """Fetch the raw Atom document for a channel.

        Returns:
            Response body as bytes, so the XML declaration decides the encoding

        Raises:
            FetchError: On transport errors, timeouts or a non-2xx status
        """
        logger.info(
            "Fetching upstream feed for channel %s",
            channel_id,
            extra={"channel_id": channel_id},
        )
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, follow_redirects=True
            ) as client:
                r = await client.get(self._feed_url, params={"channel_id": channel_id})
                r.raise_for_status()
                return r.content
        except httpx.HTTPStatusError as exc:
            raise FetchError(
                f"Fetch failed: {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise FetchError(f"Fetch failed: {exc!r}") from exc
