"""ID3 tag storage backed by mutagen.

Where: id3handler.features.tags.adapters.id3_store
What: Read, write and delete the five ID3v2 frames id3handler manages.
Why: Keep mutagen's frame API out of the service and the parsers.
"""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar, Final, cast

from mutagen import MutagenError
from mutagen.id3 import ID3, TALB, TDRC, TIT2, TPE1, TRCK, Frame, ID3NoHeaderError

from id3handler.config.config import ID3_VERSION_DEFAULT, SUPPORTED_ID3_VERSIONS
from id3handler.features.parsing.domain.models import (
    UNKNOWN_NUMBER,
    UNKNOWN_TEXT,
    CompositeMetadata,
)
from id3handler.platform.logging import logger

__all__ = ["Id3TagStore", "parse_number_frame"]

_UTF8: Final[int] = 3


def parse_number_frame(value: str) -> int:
    """Parse ``"7"``, ``"7/12"`` or ``"2001-05-04"`` into the leading number."""
    head = value.strip()
    for separator in ("/", "-"):
        head = head.split(separator, 1)[0]
    head = head.strip()
    return int(head) if head.isascii() and head.isdigit() else UNKNOWN_NUMBER


class Id3TagStore:
    """Tag store for MP3 and other ID3v2-tagged files."""

    TEXT_FRAMES: ClassVar[dict[str, str]] = {
        "artist": "TPE1",
        "title": "TIT2",
        "album": "TALB",
    }
    TRACK_FRAME: ClassVar[str] = "TRCK"
    YEAR_FRAMES: ClassVar[tuple[str, ...]] = ("TDRC", "TYER")

    version: int

    def __init__(self, version: int = ID3_VERSION_DEFAULT) -> None:
        """Initialize the store.

        Args:
            version: ID3v2 minor version written on save (3 or 4).
        """
        if version not in SUPPORTED_ID3_VERSIONS:
            raise ValueError(f"Unsupported ID3v2 version: {version}")
        self.version = version

    def _load(self, path: Path) -> ID3 | None:
        try:
            return ID3(path)
        except ID3NoHeaderError:
            logger.debug("No ID3 header in %s", path)
            return None
        except (MutagenError, OSError) as exc:
            logger.warning("Failed to read ID3 tags from %s: %s", path, exc)
            return None

    @staticmethod
    def _frame_text(tags: ID3, frame_id: str) -> str | None:
        frame = cast(Frame | None, tags.get(frame_id))
        if frame is None:
            return None
        text = getattr(frame, "text", None)
        if not text:
            return None
        value = str(text[0]).strip()
        return value or None

    def read(self, path: Path) -> CompositeMetadata:
        """Read the managed frames, substituting sentinels for missing ones."""
        tags = self._load(path)
        if tags is None:
            return CompositeMetadata.unknown()

        texts = {
            name: self._frame_text(tags, frame_id) or UNKNOWN_TEXT
            for name, frame_id in self.TEXT_FRAMES.items()
        }
        track_text = self._frame_text(tags, self.TRACK_FRAME) or ""
        year = UNKNOWN_NUMBER
        for frame_id in self.YEAR_FRAMES:
            year_text = self._frame_text(tags, frame_id)
            if year_text:
                year = parse_number_frame(year_text)
                break

        metadata = CompositeMetadata(
            artist=texts["artist"],
            title=texts["title"],
            album=texts["album"],
            track=parse_number_frame(track_text),
            year=year,
        )
        logger.debug("Read %s from %s", metadata, path)
        return metadata

    def has_tags(self, path: Path) -> bool:
        return self._load(path) is not None

    def write(self, path: Path, metadata: CompositeMetadata) -> bool:
        """Replace the file's ID3v2 tag with the five managed frames."""
        tags = ID3()
        tags.add(TPE1(encoding=_UTF8, text=[metadata.artist]))
        tags.add(TIT2(encoding=_UTF8, text=[metadata.title]))
        tags.add(TALB(encoding=_UTF8, text=[metadata.album]))
        tags.add(TRCK(encoding=_UTF8, text=[str(metadata.track)]))
        tags.add(TDRC(encoding=_UTF8, text=[str(metadata.year)]))
        if self.version == 3:
            tags.update_to_v23()
        try:
            tags.save(path, v2_version=self.version)
        except (MutagenError, OSError) as exc:
            logger.error("Failed to write ID3 tags to %s: %s", path, exc)
            return False
        return True

    def remove(self, path: Path) -> bool:
        """Strip ID3v1 and ID3v2 tags from the file."""
        tags = self._load(path)
        if tags is None:
            return False
        try:
            tags.delete(path)
        except (MutagenError, OSError) as exc:
            logger.error("Failed to remove ID3 tags from %s: %s", path, exc)
            return False
        return True
