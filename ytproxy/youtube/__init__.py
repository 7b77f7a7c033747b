"""Client for YouTube's public channel feeds."""

from .client import YouTubeFeedClient

__all__ = ["YouTubeFeedClient"]
