"""
Summary: Port describing the tag storage the service depends on.
Why: Let the service run against mutagen in production and fakes in tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from id3handler.features.parsing.domain.models import CompositeMetadata


@runtime_checkable
class TagStorePort(Protocol):
    """Port for reading and writing the tags of one audio file."""

    def read(self, path: Path) -> CompositeMetadata:
        """Return the stored tags, with sentinels for anything absent."""
        ...

    def has_tags(self, path: Path) -> bool:
        """Return True if the file carries a tag header at all."""
        ...

    def write(self, path: Path, metadata: CompositeMetadata) -> bool:
        """Replace the stored tags; False on failure."""
        ...

    def remove(self, path: Path) -> bool:
        """Delete the stored tags; False on failure."""
        ...


__all__ = ["TagStorePort"]
