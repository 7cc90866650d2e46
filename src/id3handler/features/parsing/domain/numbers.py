"""Where: id3handler.features.parsing.domain.numbers
What: Parse bounded integers out of free-form text and locate valid ones.
Why: Years and track numbers are only trusted once they fall inside a range.
"""

from __future__ import annotations

from .models import UNKNOWN_NUMBER_TEXT
from .scanner import find_numeric_run
from .trimmer import trim

__all__ = ["bounded_int", "find_verified_number", "verify_number"]


def bounded_int(text: str, minimum: int, maximum: int) -> int | None:
    """Parse ``text`` as an integer inside ``[minimum, maximum]``.

    Surrounding separators are ignored. Returns ``None`` for anything that
    is not a plain decimal integer or that falls outside the range.
    """
    candidate = trim(text)
    # int() would also accept "1_000", "+5" and non-ASCII digits.
    if not (candidate.isascii() and candidate.isdigit()):
        return None
    value = int(candidate)
    if value < minimum or value > maximum:
        return None
    return value


def verify_number(text: str, minimum: int, maximum: int) -> str:
    """String form of :func:`bounded_int`, ``"0"`` when the value is rejected."""
    value = bounded_int(text, minimum, maximum)
    return str(value) if value is not None else UNKNOWN_NUMBER_TEXT


def find_verified_number(text: str, minimum: int, maximum: int, length: int) -> int | None:
    """Find the first ``length``-digit run whose value lies in the range.

    Runs that parse but fall outside the range (catalog numbers, bitrates)
    are skipped and the scan resumes after them.
    """
    start = 0
    while start < len(text):
        position = find_numeric_run(text, start, length)
        if position is None:
            return None
        if bounded_int(text[position:position + length], minimum, maximum) is not None:
            return position
        start = position + length
    return None
