"""Where: id3handler.features.parsing.usecases.metadata_assembler
What: Build one CompositeMetadata record from a path or from explicit values.
Why: Offer the single entry point the CLI and tag service depend on.
"""

from __future__ import annotations

from typing import final

from id3handler.platform.logging import logger

from ..domain.models import UNKNOWN_NUMBER, CompositeMetadata
from ..domain.scanner import find_last
from .album_parser import AlbumParser
from .track_parser import TrackParser

__all__ = ["MetadataAssembler"]


def _plain_int(value: str) -> int:
    """Parse a decimal integer, or return the numeric sentinel."""
    candidate = value.strip()
    if candidate.isascii() and candidate.isdigit():
        return int(candidate)
    return UNKNOWN_NUMBER


@final
class MetadataAssembler:
    """Combine album and track parsing into a composite record."""

    @staticmethod
    def parse(path: str, current_year: int) -> CompositeMetadata:
        """Infer metadata from a path shaped like ``ARTIST - YEAR - ALBUM/TRACK - TITLE``.

        Args:
            path: Path to the audio file, or an override string of the same shape.
            current_year: Latest year accepted as a release year.

        Returns:
            CompositeMetadata: The merged record. A path without any directory
            part yields a record made entirely of sentinels.
        """
        if find_last(path, "/") is None:
            logger.debug("No directory component in %r; nothing to infer", path)
            return CompositeMetadata.unknown()

        album = AlbumParser.parse(path, current_year)
        track = TrackParser.parse(path)
        metadata = CompositeMetadata.merge(album, track)
        logger.debug("Parsed %r as %s", path, metadata)
        return metadata

    @staticmethod
    def force(artist: str, year: str, album: str, track: str, title: str) -> CompositeMetadata:
        """Build a record from explicit values without any range checks.

        ``year`` and ``track`` that are not plain integers become ``0``.
        """
        return CompositeMetadata(
            artist=artist,
            title=title,
            album=album,
            track=_plain_int(track),
            year=_plain_int(year),
        )
