"""src/id3handler/features/tags/usecases/tag_service.py
What: Show, update and remove the tags of one file through a tag store.
Why: Hold the write policy (skip identical, refuse incomplete) in one place.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import final

from id3handler.features.parsing.domain.models import CompositeMetadata
from id3handler.platform.logging import logger

from ..domain.comparison import FIELD_COUNT, count_matching_fields, describe, is_incomplete
from .ports import TagStorePort

__all__ = [
    "RemoveResult",
    "RemoveStatus",
    "TagEvent",
    "TagService",
    "UpdateResult",
    "UpdateStatus",
]


class TagEvent(StrEnum):
    """Structured event identifiers for tag logs."""

    UPDATE_SUCCESS = "tags.update.success"
    UPDATE_SKIP = "tags.update.skip"
    UPDATE_INCOMPLETE = "tags.update.incomplete"
    UPDATE_ERROR = "tags.update.error"
    REMOVE_SUCCESS = "tags.remove.success"
    REMOVE_SKIP = "tags.remove.skip"
    REMOVE_ERROR = "tags.remove.error"


class UpdateStatus(StrEnum):
    UPDATED = "updated"
    UNCHANGED = "unchanged"
    INCOMPLETE = "incomplete"
    FAILED = "failed"


class RemoveStatus(StrEnum):
    REMOVED = "removed"
    ALREADY_EMPTY = "already_empty"
    NO_TAGS = "no_tags"
    FAILED = "failed"


@dataclass(slots=True, frozen=True)
class UpdateResult:
    """Outcome of an update request."""

    path: Path
    status: UpdateStatus
    requested: CompositeMetadata
    previous: CompositeMetadata

    @property
    def success(self) -> bool:
        return self.status in (UpdateStatus.UPDATED, UpdateStatus.UNCHANGED)


@dataclass(slots=True, frozen=True)
class RemoveResult:
    """Outcome of a remove request."""

    path: Path
    status: RemoveStatus
    previous: CompositeMetadata

    @property
    def success(self) -> bool:
        return self.status is not RemoveStatus.FAILED


@final
class TagService:
    """Apply tag changes to files through a :class:`TagStorePort`."""

    store: TagStorePort

    def __init__(self, store: TagStorePort) -> None:
        self.store = store

    def show(self, path: Path) -> CompositeMetadata:
        """Return the tags currently stored in ``path``."""
        return self.store.read(path)

    def update(self, path: Path, metadata: CompositeMetadata, *, verbose: bool = False) -> UpdateResult:
        """Write ``metadata`` unless it is incomplete or already stored.

        Args:
            path: Audio file to update.
            metadata: Desired tag values.
            verbose: Report files that needed no change at INFO level.

        Returns:
            UpdateResult: What happened to the file.
        """
        previous = self.store.read(path)

        if is_incomplete(metadata):
            logger.error(
                "Some input values are incorrect: %s. Aborting.",
                describe(metadata),
                extra={
                    "tag_event": TagEvent.UPDATE_INCOMPLETE.value,
                    "file_path": str(path),
                    "summary": describe(metadata),
                },
            )
            return UpdateResult(path, UpdateStatus.INCOMPLETE, metadata, previous)

        if count_matching_fields(metadata, previous) == FIELD_COUNT:
            logger.log(
                logging.INFO if verbose else logging.DEBUG,
                "No need to update %s, the information already matches",
                path,
                extra={"tag_event": TagEvent.UPDATE_SKIP.value, "file_path": str(path)},
            )
            return UpdateResult(path, UpdateStatus.UNCHANGED, metadata, previous)

        if not self.store.write(path, metadata):
            logger.error(
                "Failed to update ID3 tags of %s",
                path,
                extra={"tag_event": TagEvent.UPDATE_ERROR.value, "file_path": str(path)},
            )
            return UpdateResult(path, UpdateStatus.FAILED, metadata, previous)

        logger.info(
            "Updated ID3 tags of %s as %s",
            path,
            describe(metadata),
            extra={
                "tag_event": TagEvent.UPDATE_SUCCESS.value,
                "file_path": str(path),
                "summary": describe(metadata),
            },
        )
        return UpdateResult(path, UpdateStatus.UPDATED, metadata, previous)

    def remove(self, path: Path, *, verbose: bool = False) -> RemoveResult:
        """Delete the tags of ``path`` if it carries any."""
        previous = self.store.read(path)
        skip_level = logging.INFO if verbose else logging.DEBUG

        if not self.store.has_tags(path):
            logger.log(
                skip_level,
                "No tags found in %s",
                path,
                extra={"tag_event": TagEvent.REMOVE_SKIP.value, "file_path": str(path)},
            )
            return RemoveResult(path, RemoveStatus.NO_TAGS, previous)

        # Partly filled tags are still removed; only a fully unknown record is skipped.
        if previous == CompositeMetadata.unknown():
            logger.log(
                skip_level,
                "No need to remove, %s is already empty",
                path,
                extra={"tag_event": TagEvent.REMOVE_SKIP.value, "file_path": str(path)},
            )
            return RemoveResult(path, RemoveStatus.ALREADY_EMPTY, previous)

        if not self.store.remove(path):
            logger.error(
                "Failed to remove tags from %s",
                path,
                extra={"tag_event": TagEvent.REMOVE_ERROR.value, "file_path": str(path)},
            )
            return RemoveResult(path, RemoveStatus.FAILED, previous)

        logger.info(
            "Removed tags from %s",
            path,
            extra={"tag_event": TagEvent.REMOVE_SUCCESS.value, "file_path": str(path)},
        )
        return RemoveResult(path, RemoveStatus.REMOVED, previous)
