"""Exceptions raised while building a channel feed."""


class FeedError(Exception):
    """Base class for failures turning an upstream feed into RSS."""


class FetchError(FeedError):
    """The upstream feed could not be retrieved."""


class ParseError(FeedError):
    """The upstream response was not a readable Atom feed."""
