"""Tolerant parsing of YouTube channel Atom feeds."""

# Bandit: parsing handled via defusedxml safe APIs
from datetime import datetime, timezone
from xml.etree.ElementTree import Element  # nosec B405

from defusedxml import DefusedXmlException
from defusedxml.ElementTree import ParseError as DefusedXMLParseError
from defusedxml.ElementTree import fromstring as safe_fromstring

from ytproxy.errors import ParseError

from .models import AtomFeed, FeedEntry

# XML namespaces for YouTube feeds
NAMESPACES = {
    "yt": "http://www.youtube.com/xml/schemas/2015",
    "atom": "http://www.w3.org/2005/Atom",
    "media": "http://search.yahoo.com/mrss/",
}

FEED_TAG = f"{{{NAMESPACES['atom']}}}feed"

DEFAULT_AUTHOR = "YouTube Channel"


def _text(elem: Element, path: str) -> str | None:
    """Return the stripped text at ``path``, or None when absent or blank."""
    found = elem.find(path, NAMESPACES)
    if found is None or found.text is None:
        return None
    return found.text.strip() or None


def _link(entry: Element) -> str | None:
    """Pick the entry's alternate link, falling back to the first one."""
    links = entry.findall("atom:link", NAMESPACES)
    for link in links:
        if link.get("rel", "alternate") == "alternate":
            return link.get("href")
    if links:
        return links[0].get("href")
    return None


def _published(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        # Convert Z to +00:00 for older fromisoformat implementations
        published = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if published.tzinfo is None:
        published = published.replace(tzinfo=timezone.utc)
    return published


def parse_feed(xml_text: str | bytes) -> AtomFeed:
    """
    Parse a YouTube Atom document into an AtomFeed.

    Missing fields never raise. Entries keep whatever they carry, and the
    author of an entry falls back to the feed author and then to a fixed
    placeholder.

    Args:
        xml_text: Raw response body from the upstream feed endpoint

    Returns:
        AtomFeed with zero or more entries, in document order

    Raises:
        ParseError: If the body is not well-formed XML or not an Atom feed
    """
    try:
        root = safe_fromstring(xml_text)
    except (DefusedXMLParseError, DefusedXmlException) as exc:
        raise ParseError(f"Malformed feed XML: {exc}") from exc

    if root.tag != FEED_TAG:
        raise ParseError(f"Unexpected root element {root.tag!r}, expected Atom feed")

    feed_author = _text(root, "atom:author/atom:name")

    entries = []
    for entry in root.findall("atom:entry", NAMESPACES):
        entries.append(
            FeedEntry(
                video_id=_text(entry, "yt:videoId"),
                title=_text(entry, "atom:title"),
                link=_link(entry),
                published=_published(_text(entry, "atom:published")),
                author=_text(entry, "atom:author/atom:name")
                or feed_author
                or DEFAULT_AUTHOR,
                description=_text(entry, "media:group/media:description") or "",
            )
        )

    return AtomFeed(
        title=_text(root, "atom:title"),
        author=feed_author,
        entries=entries,
    )
