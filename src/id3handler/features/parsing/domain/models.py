"""Where: id3handler.features.parsing.domain.models
What: Value objects produced by the path parsers and their unknown sentinels.
Why: Keep one definition of the record shape shared with the tag store.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

# Placeholders meaning "could not be determined". Consumers compare against
# these values, so they must stay stable.
UNKNOWN_TEXT: Final[str] = "empty"
UNKNOWN_NUMBER: Final[int] = 0
UNKNOWN_NUMBER_TEXT: Final[str] = "0"

YEAR_MIN: Final[int] = 1900
YEAR_SEARCH_MIN: Final[int] = 1800
TRACK_MIN: Final[int] = 1
TRACK_MAX: Final[int] = 99


@dataclass(frozen=True, slots=True)
class AlbumInfo:
    """Artist, album and year taken from the enclosing directory name."""

    artist: str = UNKNOWN_TEXT
    album: str = UNKNOWN_TEXT
    year: int = UNKNOWN_NUMBER


@dataclass(frozen=True, slots=True)
class TrackInfo:
    """Track number and title taken from the file name."""

    title: str = UNKNOWN_TEXT
    track: int = UNKNOWN_NUMBER


@dataclass(frozen=True, slots=True)
class CompositeMetadata:
    """Merged tag record for one audio file."""

    artist: str = UNKNOWN_TEXT
    title: str = UNKNOWN_TEXT
    album: str = UNKNOWN_TEXT
    track: int = UNKNOWN_NUMBER
    year: int = UNKNOWN_NUMBER

    @classmethod
    def unknown(cls) -> CompositeMetadata:
        """Return a record with every field set to its sentinel."""
        return cls()

    @classmethod
    def merge(cls, album: AlbumInfo, track: TrackInfo) -> CompositeMetadata:
        """Combine directory and file name results into one record."""
        return cls(
            artist=album.artist,
            title=track.title,
            album=album.album,
            track=track.track,
            year=album.year,
        )


def text_or_unknown(value: str) -> str:
    """Map an empty string to the text sentinel."""
    return value if value else UNKNOWN_TEXT


def number_or_unknown(value: int | None) -> int:
    """Map a missing number to the numeric sentinel."""
    return value if value is not None else UNKNOWN_NUMBER


__all__ = [
    "AlbumInfo",
    "CompositeMetadata",
    "TrackInfo",
    "TRACK_MAX",
    "TRACK_MIN",
    "UNKNOWN_NUMBER",
    "UNKNOWN_NUMBER_TEXT",
    "UNKNOWN_TEXT",
    "YEAR_MIN",
    "YEAR_SEARCH_MIN",
    "number_or_unknown",
    "text_or_unknown",
]
