"""Channel feed transform: upstream Atom in, RSS 2.0 out."""

from ytproxy.config import Settings, get_settings
from ytproxy.youtube.client import YouTubeFeedClient

from .parser import parse_feed
from .render import render_rss


async def transform(channel_id: str, settings: Settings | None = None) -> str:
    """Fetch a channel's Atom feed and render it as an RSS document.

    Raises:
        FetchError: If the upstream could not be fetched
        ParseError: If the upstream response is not a valid Atom feed
    """
    settings = settings or get_settings()
    client = YouTubeFeedClient(
        feed_url=settings.upstream_feed_url,
        timeout=settings.upstream_timeout_seconds,
    )
    xml_text = await client.fetch_channel_feed(channel_id)
    return render_rss(channel_id, parse_feed(xml_text))
