"""Shared fixtures for the YouTube RSS proxy tests."""

import os
from unittest.mock import patch

import pytest

from ytproxy.config import Settings

# Channel feed with two entries, shaped like YouTube's videos.xml
SAMPLE_ATOM_XML = """<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns:yt="http://www.youtube.com/xml/schemas/2015" xmlns:media="http://search.yahoo.com/mrss/" xmlns="http://www.w3.org/2005/Atom">
  <link rel="self" href="http://www.youtube.com/feeds/videos.xml?channel_id=UCuAXFkgsw1L7xaCfnd5JJOw"/>
  <id>yt:channel:uAXFkgsw1L7xaCfnd5JJOw</id>
  <yt:channelId>uAXFkgsw1L7xaCfnd5JJOw</yt:channelId>
  <title>Test Channel</title>
  <link rel="alternate" href="https://www.youtube.com/channel/UCuAXFkgsw1L7xaCfnd5JJOw"/>
  <author>
    <name>Test Channel</name>
    <uri>https://www.youtube.com/channel/UCuAXFkgsw1L7xaCfnd5JJOw</uri>
  </author>
  <published>2015-03-01T12:00:00+00:00</published>
  <entry>
    <id>yt:video:abc123</id>
    <yt:videoId>abc123</yt:videoId>
    <yt:channelId>UCuAXFkgsw1L7xaCfnd5JJOw</yt:channelId>
    <title>Video One</title>
    <link rel="alternate" href="https://www.youtube.com/watch?v=abc123"/>
    <author>
      <name>Entry Author</name>
      <uri>https://www.youtube.com/channel/UCuAXFkgsw1L7xaCfnd5JJOw</uri>
    </author>
    <published>2024-01-15T10:30:00+00:00</published>
    <updated>2024-01-16T08:00:00+00:00</updated>
    <media:group>
      <media:title>Video One</media:title>
      <media:content url="https://www.youtube.com/v/abc123?version=3" type="application/x-shockwave-flash" width="640" height="390"/>
      <media:thumbnail url="https://i2.ytimg.com/vi/abc123/hqdefault.jpg" width="480" height="360"/>
      <media:description>First video &amp; &lt;b&gt;bold&lt;/b&gt; claims</media:description>
    </media:group>
  </entry>
  <entry>
    <id>yt:video:def456</id>
    <yt:videoId>def456</yt:videoId>
    <yt:channelId>UCuAXFkgsw1L7xaCfnd5JJOw</yt:channelId>
    <title>Video Two</title>
    <link rel="alternate" href="https://www.youtube.com/watch?v=def456"/>
    <published>2024-01-14T15:45:00Z</published>
    <media:group>
      <media:title>Video Two</media:title>
      <media:description>Second video</media:description>
    </media:group>
  </entry>
</feed>
"""

# Feed with exactly one entry
SINGLE_ENTRY_ATOM_XML = """<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns:yt="http://www.youtube.com/xml/schemas/2015" xmlns:media="http://search.yahoo.com/mrss/" xmlns="http://www.w3.org/2005/Atom">
  <title>Solo Channel</title>
  <entry>
    <yt:videoId>solo001</yt:videoId>
    <title>Only Video</title>
    <link rel="alternate" href="https://www.youtube.com/watch?v=solo001"/>
    <published>2023-06-01T00:00:00+00:00</published>
  </entry>
</feed>
"""

# Feed without title, author or entries
EMPTY_ATOM_XML = """<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns:yt="http://www.youtube.com/xml/schemas/2015" xmlns="http://www.w3.org/2005/Atom">
</feed>
"""

# Entry missing title, link, author, published and description
SPARSE_ATOM_XML = """<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns:yt="http://www.youtube.com/xml/schemas/2015" xmlns="http://www.w3.org/2005/Atom">
  <entry>
    <yt:videoId>bare01</yt:videoId>
  </entry>
</feed>
"""

# Truncated document for error handling tests
INVALID_XML = """<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns:yt="http://www.youtube.com/xml/schemas/2015" xmlns="http://www.w3.org/2005/Atom">
  <title>Channel Title</title>
  <entry>
    <yt:videoId>incomplete
"""


class FakeClock:
    """Manually advanced replacement for time.monotonic."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    """Create a fake clock starting at a fixed reading."""
    return FakeClock()


@pytest.fixture
def settings():
    """Settings built from defaults only, ignoring the process environment."""
    with patch.dict(os.environ, {}, clear=True):
        return Settings(_env_file=None)


@pytest.fixture
def atom_xml():
    """Two-entry channel feed."""
    return SAMPLE_ATOM_XML


@pytest.fixture
def single_entry_xml():
    """Channel feed with a single entry."""
    return SINGLE_ENTRY_ATOM_XML


@pytest.fixture
def empty_feed_xml():
    """Channel feed with no title, author or entries."""
    return EMPTY_ATOM_XML


@pytest.fixture
def sparse_feed_xml():
    """Channel feed whose only entry lacks most fields."""
    return SPARSE_ATOM_XML


@pytest.fixture
def invalid_xml():
    """Truncated, malformed XML."""
    return INVALID_XML
