"""Character scanning primitives used by the path parsers.

Where: id3handler.features.parsing.domain.scanner
What: Locate characters and fixed-length digit runs, and slice without mutation.
Why: The parsers only ever need positions and substrings, never regexes.

Every lookup returns ``None`` when nothing is found, so a match at index 0 is
distinguishable from a miss.
"""

from __future__ import annotations

from collections.abc import Iterator

__all__ = [
    "between",
    "count_occurrences",
    "find_first",
    "find_last",
    "find_numeric_run",
    "iter_numeric_runs",
    "left",
    "right",
]


def find_first(text: str, char: str) -> int | None:
    """Return the leftmost index of ``char`` in ``text``."""
    index = text.find(char)
    return index if index >= 0 else None


def find_last(text: str, char: str) -> int | None:
    """Return the rightmost index of ``char`` in ``text``."""
    index = text.rfind(char)
    return index if index >= 0 else None


def count_occurrences(text: str, char: str) -> int:
    return text.count(char)


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def iter_numeric_runs(text: str, start: int = 0) -> Iterator[tuple[int, int]]:
    """Yield ``(position, length)`` for every maximal digit run from ``start``.

    A run that touches ``start`` is measured from ``start``, not from the
    digits that may precede it.
    """
    run_start: int | None = None
    for index in range(max(start, 0), len(text)):
        if _is_digit(text[index]):
            if run_start is None:
                run_start = index
        elif run_start is not None:
            yield run_start, index - run_start
            run_start = None
    if run_start is not None:
        yield run_start, len(text) - run_start


def find_numeric_run(text: str, start: int, length: int) -> int | None:
    """Return where the first digit run of exactly ``length`` characters begins.

    Longer and shorter runs are skipped, so ``"12345"`` holds no 4-digit run.
    """
    for position, size in iter_numeric_runs(text, start):
        if size == length:
            return position
    return None


def left(text: str, end: int) -> str:
    """Everything before ``end``."""
    return text[:end]


def right(text: str, start: int) -> str:
    """Everything from ``start`` onward."""
    return text[start:]


def between(text: str, start: int, end: int) -> str:
    """The half-open slice ``[start, end)``; empty when the bounds cross."""
    if end <= start:
        return ""
    return text[start:end]
