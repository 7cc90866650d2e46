"""Rich console handler for tag events.

Where: platform/logging/handlers.py
What: Render structured ``tag_event`` log records with icons, colours and short paths.
Why: Keep per-file outcomes readable when a shell loop tags a whole library.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class TagEventRichHandler(RichHandler):
    """Rich handler that styles tag events and renders paths in white."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "tags.update.success": ("🎉", "green"),
        "tags.update.skip": ("↪️", "yellow"),
        "tags.update.incomplete": ("⛔", "red"),
        "tags.update.error": ("❌", "red"),
        "tags.remove.success": ("🧹", "green"),
        "tags.remove.skip": ("ℹ️", "yellow"),
        "tags.remove.error": ("❌", "red"),
    }
    _EVENT_PREFIXES: ClassVar[dict[str, str]] = {
        "tags.update.success": "Updated ",
        "tags.update.skip": "Already up to date ",
        "tags.update.incomplete": "Refusing incomplete tags for ",
        "tags.update.error": "Failed to update ",
        "tags.remove.success": "Removed tags from ",
        "tags.remove.skip": "Nothing to remove from ",
        "tags.remove.error": "Failed to remove tags from ",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 3

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a path keeping only its last few segments."""
        pure_path = self._to_pure_path(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]
            display_string = "…" + separator + separator.join(body_parts)
        else:
            display_string = str(pure_path)

        text = Text()
        for char in display_string:
            if char == separator or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _render_tag_event(self, record: logging.LogRecord) -> Text | None:
        """Render structured tag events with dedicated styling."""

        event = getattr(record, "tag_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        prefix = self._EVENT_PREFIXES.get(event)
        if prefix:
            _ = body.append(prefix)

        file_path = getattr(record, "file_path", None)
        if file_path:
            _ = body.append_text(self._format_path(str(file_path)))

        details: list[str] = []
        summary = getattr(record, "summary", None)
        if summary:
            details.append(str(summary))
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        tag_text = self._render_tag_event(record)
        if tag_text is not None:
            return tag_text
        return super().render_message(record, message)


__all__ = ["TagEventRichHandler"]
