"""RSS proxy endpoint for the YouTube RSS proxy."""

import logging

from fastapi import APIRouter, Depends, Query, Response
from fastapi.responses import PlainTextResponse

from ytproxy.api.dependencies import get_app_settings, get_feed_cache
from ytproxy.config import Settings
from ytproxy.errors import FeedError
from ytproxy.rss.cache import FeedCache, fetch_and_cache_feed

RSS_MEDIA_TYPE = "application/rss+xml; charset=utf-8"

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/rss", tags=["rss"])


@router.get("")
async def get_rss(
    channel_id: str | None = Query(default=None, description="YouTube channel ID"),
    cache: FeedCache = Depends(get_feed_cache),
    settings: Settings = Depends(get_app_settings),
):
    """
    Serve a YouTube channel feed as RSS 2.0.

    A document rendered within the cache window is served from memory;
    otherwise the upstream Atom feed is fetched and transformed. Fetch and
    parse failures are logged and reported to the caller as a generic 500.

    Query Parameters:
        - channel_id: Channel to proxy (required)
    """
    if not channel_id:
        return PlainTextResponse("Missing channel_id parameter", status_code=400)

    try:
        document = await fetch_and_cache_feed(cache, channel_id, settings)
    except FeedError:
        logger.exception(
            "Error generating feed for channel %s",
            channel_id,
            extra={"channel_id": channel_id},
        )
        return PlainTextResponse("Failed to fetch or parse feed", status_code=500)

    return Response(content=document, media_type=RSS_MEDIA_TYPE)
