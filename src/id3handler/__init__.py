"""id3handler - infer ID3 tags from music file paths."""

__version__ = "0.3.0"
