"""Strip separator characters from the ends of a parsed field."""

from __future__ import annotations

from typing import Final

SEPARATORS: Final[str] = " -_\t\n/"


def trim(text: str) -> str:
    """Remove leading and trailing separators; idempotent."""
    return text.strip(SEPARATORS)


__all__ = ["SEPARATORS", "trim"]
