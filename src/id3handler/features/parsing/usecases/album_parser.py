"""Where: id3handler.features.parsing.usecases.album_parser
What: Derive artist, year and album from the directory that holds a track.
Why: Library folders are usually named ``ARTIST - YEAR - ALBUM``.
"""

from __future__ import annotations

from typing import ClassVar, final

from ..domain.models import (
    YEAR_MIN,
    YEAR_SEARCH_MIN,
    AlbumInfo,
    number_or_unknown,
    text_or_unknown,
)
from ..domain.numbers import bounded_int, find_verified_number
from ..domain.scanner import between, count_occurrences, find_first, find_last, left, right
from ..domain.trimmer import trim

__all__ = ["AlbumParser", "directory_segment"]


def directory_segment(path: str) -> str:
    """Return the name of the directory immediately containing the file.

    A string without ``/`` is taken to be the directory name itself.
    """
    split = find_last(path, "/")
    if split is None:
        return path
    parent = left(path, split)
    split = find_last(parent, "/")
    if split is None:
        return parent
    return right(parent, split + 1)


@final
class AlbumParser:
    """Heuristic parser for ``ARTIST - YEAR - ALBUM`` directory names."""

    # Names this short without a hyphen are assumed to be a bare artist.
    ARTIST_ONLY_MAX_LENGTH: ClassVar[int] = 10
    YEAR_DIGITS: ClassVar[int] = 4

    @classmethod
    def parse(cls, path: str, current_year: int) -> AlbumInfo:
        """Parse album information out of ``path``.

        Args:
            path: Full path to a track, or a directory name.
            current_year: Upper bound for plausible release years.

        Returns:
            AlbumInfo: Parsed fields, with sentinels for anything undetermined.
        """
        segment = directory_segment(path)
        hyphens = count_occurrences(segment, "-")

        if len(segment) <= cls.ARTIST_ONLY_MAX_LENGTH and hyphens == 0:
            return cls._build(trim(segment), "", None)

        artist_raw, year_raw, album_raw = cls._split(segment, hyphens, current_year)
        year = bounded_int(year_raw, YEAR_MIN, current_year)
        return cls._build(trim(artist_raw), trim(album_raw), year)

    @classmethod
    def _split(cls, segment: str, hyphens: int, current_year: int) -> tuple[str, str, str]:
        """Cut ``segment`` into raw artist, year and album pieces."""
        year_pos = find_verified_number(segment, YEAR_SEARCH_MIN, current_year, cls.YEAR_DIGITS)
        if year_pos is not None:
            year_end = year_pos + cls.YEAR_DIGITS
            return (
                left(segment, year_pos),
                between(segment, year_pos, year_end),
                right(segment, year_end),
            )

        first = find_first(segment, "-")
        last = find_last(segment, "-")
        if first is None or last is None:
            return segment, "", ""

        if hyphens > 1:
            return left(segment, first), between(segment, first + 1, last), right(segment, last + 1)

        # A single hyphen with no year: the release is assumed to be current.
        return left(segment, first), str(current_year), right(segment, first + 1)

    @staticmethod
    def _build(artist: str, album: str, year: int | None) -> AlbumInfo:
        if artist == "." and not album:
            artist = ""
        return AlbumInfo(
            artist=text_or_unknown(artist),
            album=text_or_unknown(album),
            year=number_or_unknown(year),
        )
