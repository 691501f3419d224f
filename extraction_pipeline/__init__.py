"""YouTube channel views extractor."""

__version__ = "1.0.0"
