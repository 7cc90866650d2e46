"""
Summary: Tag storage and the read/update/remove flows built on it.
Why: Keep mutagen behind one adapter while the service decides what to write.
"""

from .adapters.id3_store import Id3TagStore
from .domain.comparison import FIELD_COUNT, count_matching_fields, describe, is_incomplete
from .usecases.ports import TagStorePort
from .usecases.tag_service import (
    RemoveResult,
    RemoveStatus,
    TagEvent,
    TagService,
    UpdateResult,
    UpdateStatus,
)

__all__ = [
    "FIELD_COUNT",
    "Id3TagStore",
    "RemoveResult",
    "RemoveStatus",
    "TagEvent",
    "TagService",
    "TagStorePort",
    "UpdateResult",
    "UpdateStatus",
    "count_matching_fields",
    "describe",
    "is_incomplete",
]
