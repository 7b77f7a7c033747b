"""YouTube channel feed proxy serving RSS 2.0."""

__version__ = "1.0.0"
