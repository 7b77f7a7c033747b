"""Rendering of parsed feeds as RSS 2.0 with Media RSS extensions."""

from datetime import datetime, timezone
from email.utils import format_datetime
from xml.dom import minidom

from .models import AtomFeed

MEDIA_NS = "http://search.yahoo.com/mrss/"
ATOM_NS = "http://www.w3.org/2005/Atom"

CHANNEL_URL = "https://www.youtube.com/channel/{channel_id}"
DEFAULT_CHANNEL_TITLE = "YouTube Channel"

# Terminates a CDATA section, so it cannot appear inside one
CDATA_END = "]]>"


def format_pub_date(published: datetime | None) -> str:
    """Format a timestamp as an RFC 1123 date in GMT, or "" if unknown."""
    if published is None:
        return ""
    return format_datetime(published.astimezone(timezone.utc), usegmt=True)


def _append(
    doc: minidom.Document, parent: minidom.Element, tag: str, text: str | None = None
) -> minidom.Element:
    elem = doc.createElement(tag)
    if text is not None:
        elem.appendChild(doc.createTextNode(text))
    parent.appendChild(elem)
    return elem


def render_rss(channel_id: str, feed: AtomFeed) -> str:
    """
    Render an RSS 2.0 document for a channel.

    Every item carries the same set of child elements; values missing from
    the upstream entry are written as empty elements. Descriptions are
    emitted as CDATA unless they contain the CDATA terminator.

    Args:
        channel_id: Channel identifier, used verbatim in the channel link
        feed: Parsed upstream feed

    Returns:
        Pretty-printed XML text with a UTF-8 XML declaration
    """
    channel_title = feed.title or DEFAULT_CHANNEL_TITLE

    doc = minidom.Document()
    rss = doc.createElement("rss")
    rss.setAttribute("version", "2.0")
    rss.setAttribute("xmlns:media", MEDIA_NS)
    rss.setAttribute("xmlns:atom", ATOM_NS)
    doc.appendChild(rss)

    channel = _append(doc, rss, "channel")
    _append(doc, channel, "title", channel_title)
    _append(doc, channel, "link", CHANNEL_URL.format(channel_id=channel_id))
    _append(doc, channel, "description", f"YouTube RSS feed for {channel_title}")

    for entry in feed.entries:
        item = _append(doc, channel, "item")
        _append(doc, item, "title", entry.title)
        _append(doc, item, "link", entry.link)
        _append(doc, item, "guid", entry.link)
        _append(doc, item, "author", entry.author)
        _append(doc, item, "pubDate", format_pub_date(entry.published))

        description = _append(doc, item, "description")
        if CDATA_END in entry.description:
            description.appendChild(doc.createTextNode(entry.description))
        else:
            description.appendChild(doc.createCDATASection(entry.description))

        thumbnail = _append(doc, item, "media:thumbnail")
        thumbnail.setAttribute("url", entry.thumbnail_url)

    return doc.toprettyxml(indent="  ", encoding="UTF-8").decode("utf-8")
