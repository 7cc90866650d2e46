"""Where: id3handler.features.parsing.usecases.track_parser
What: Derive the track number and title from an audio file name.
Why: File names usually follow ``TRACK - TITLE.ext``.
"""

from __future__ import annotations

from typing import ClassVar, final

from ..domain.models import (
    TRACK_MAX,
    TRACK_MIN,
    TrackInfo,
    number_or_unknown,
    text_or_unknown,
)
from ..domain.numbers import bounded_int
from ..domain.scanner import between, find_first, find_last, find_numeric_run, left, right
from ..domain.trimmer import SEPARATORS, trim

__all__ = ["TrackParser", "file_stem"]


def file_stem(path: str) -> str:
    """Return the file name without its directory or extension."""
    split = find_last(path, "/")
    name = right(path, split + 1) if split is not None else path
    dot = find_last(name, ".")
    return left(name, dot) if dot is not None else name


@final
class TrackParser:
    """Heuristic parser for ``TRACK - TITLE`` file names."""

    # Shorter stems carry too little to split reliably.
    MIN_PARSEABLE_LENGTH: ClassVar[int] = 6
    TRACK_DIGITS: ClassVar[int] = 2
    # Separator width after the track number, as in "01. " or "01 -".
    SEPARATOR_WIDTH: ClassVar[int] = 2
    SEPARATOR_CHARS: ClassVar[str] = SEPARATORS + "."

    @classmethod
    def parse(cls, path: str) -> TrackInfo:
        """Parse track information out of ``path``.

        Args:
            path: A file name or a full path to one.

        Returns:
            TrackInfo: Parsed fields, with sentinels for anything undetermined.
        """
        name = file_stem(path)
        if len(name) < cls.MIN_PARSEABLE_LENGTH:
            return TrackInfo()

        track_raw, title_raw = cls._split(name)
        return TrackInfo(
            title=text_or_unknown(trim(title_raw)),
            track=number_or_unknown(bounded_int(track_raw, TRACK_MIN, TRACK_MAX)),
        )

    @classmethod
    def _split(cls, name: str) -> tuple[str, str]:
        """Cut ``name`` into raw track and title pieces."""
        position = find_numeric_run(name, 0, cls.TRACK_DIGITS)
        if position is not None:
            digits_end = position + cls.TRACK_DIGITS
            title_start = cls._skip_separator(name, digits_end)
            return between(name, position, digits_end), right(name, title_start)

        hyphen = find_first(name, "-")
        if hyphen is None:
            # Nothing to split on; the track check rejects the whole name.
            return name, name
        return left(name, hyphen), right(name, hyphen + 1)

    @classmethod
    def _skip_separator(cls, name: str, start: int) -> int:
        """Advance past up to ``SEPARATOR_WIDTH`` separator or dot characters."""
        index = start
        limit = min(start + cls.SEPARATOR_WIDTH, len(name))
        while index < limit and name[index] in cls.SEPARATOR_CHARS:
            index += 1
        return index
