"""Pure parsing primitives and value objects."""

from .models import (
    AlbumInfo,
    CompositeMetadata,
    TrackInfo,
    UNKNOWN_NUMBER,
    UNKNOWN_TEXT,
)
from .numbers import bounded_int, find_verified_number, verify_number
from .scanner import (
    between,
    count_occurrences,
    find_first,
    find_last,
    find_numeric_run,
    left,
    right,
)
from .trimmer import SEPARATORS, trim

__all__ = [
    "AlbumInfo",
    "CompositeMetadata",
    "SEPARATORS",
    "TrackInfo",
    "UNKNOWN_NUMBER",
    "UNKNOWN_TEXT",
    "between",
    "bounded_int",
    "count_occurrences",
    "find_first",
    "find_last",
    "find_numeric_run",
    "find_verified_number",
    "left",
    "right",
    "trim",
    "verify_number",
]
