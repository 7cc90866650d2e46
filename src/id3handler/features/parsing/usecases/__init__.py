"""Parsers that turn a path into tag metadata."""

from .album_parser import AlbumParser, directory_segment
from .metadata_assembler import MetadataAssembler
from .track_parser import TrackParser, file_stem

__all__ = [
    "AlbumParser",
    "MetadataAssembler",
    "TrackParser",
    "directory_segment",
    "file_stem",
]
