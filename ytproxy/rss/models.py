"""Pydantic models for parsed YouTube Atom feeds."""

from datetime import datetime

from pydantic import BaseModel, Field

THUMBNAIL_URL = "https://i.ytimg.com/vi/{video_id}/hqdefault.jpg"


class FeedEntry(BaseModel):
    """A single video entry from a YouTube channel feed.

    Every field is optional: upstream entries are parsed tolerantly and
    gaps are filled in when the RSS document is rendered.
    """

    video_id: str | None = None
    title: str | None = None
    link: str | None = None
    published: datetime | None = None
    author: str | None = None
    description: str = ""

    @property
    def thumbnail_url(self) -> str:
        return THUMBNAIL_URL.format(video_id=self.video_id or "")


class AtomFeed(BaseModel):
    """Channel-level data plus entries extracted from an Atom document."""

    title: str | None = None
    author: str | None = None
    entries: list[FeedEntry] = Field(default_factory=list)
