"""Where: id3handler.features.tags.domain.comparison
What: Compare two tag records and decide whether one is complete enough to write.
Why: Updates skip identical tags and refuse records with undetermined fields.
"""

from __future__ import annotations

from typing import Final

from id3handler.features.parsing.domain.models import (
    TRACK_MIN,
    UNKNOWN_TEXT,
    YEAR_MIN,
    CompositeMetadata,
)

FIELD_COUNT: Final[int] = 5


def count_matching_fields(candidate: CompositeMetadata, current: CompositeMetadata) -> int:
    """Return how many of the five fields are equal in both records."""
    pairs = (
        (candidate.artist, current.artist),
        (candidate.title, current.title),
        (candidate.album, current.album),
        (candidate.track, current.track),
        (candidate.year, current.year),
    )
    return sum(1 for left, right in pairs if left == right)


def is_incomplete(metadata: CompositeMetadata) -> bool:
    """Return True when any field is unknown or out of range."""
    if UNKNOWN_TEXT in (metadata.artist, metadata.title, metadata.album):
        return True
    return metadata.track < TRACK_MIN or metadata.year < YEAR_MIN


def describe(metadata: CompositeMetadata) -> str:
    """One-line ``artist:'..' year:'..'`` summary used in log messages."""
    return (
        f"artist:'{metadata.artist}' year:'{metadata.year}' album:'{metadata.album}' "
        f"track:'{metadata.track}' title:'{metadata.title}'"
    )


__all__ = ["FIELD_COUNT", "count_matching_fields", "describe", "is_incomplete"]
