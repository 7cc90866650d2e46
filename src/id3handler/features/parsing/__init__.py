"""
Summary: Path-to-metadata heuristics.
Why: Expose the parsers and record types through one import path.
"""

from .domain import AlbumInfo, CompositeMetadata, TrackInfo, UNKNOWN_NUMBER, UNKNOWN_TEXT
from .usecases import AlbumParser, MetadataAssembler, TrackParser

__all__ = [
    "AlbumInfo",
    "AlbumParser",
    "CompositeMetadata",
    "MetadataAssembler",
    "TrackInfo",
    "TrackParser",
    "UNKNOWN_NUMBER",
    "UNKNOWN_TEXT",
]
