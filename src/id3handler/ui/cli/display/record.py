"""src/id3handler/ui/cli/display/record.py
What: Render a tag record for the ``print`` command.
Why: Keep console output formatting out of the command classes.
"""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.markup import escape

from id3handler.features.parsing import CompositeMetadata


def format_record(metadata: CompositeMetadata) -> str:
    """``'ARTIST' - YEAR - 'ALBUM' : TRACK - 'TITLE'``"""
    return (
        f"'{metadata.artist}' - {metadata.year} - '{metadata.album}'"
        f" : {metadata.track} - '{metadata.title}'"
    )


@final
class RecordDisplay:
    """Prints tag records to the console."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show(self, metadata: CompositeMetadata, *, quiet: bool = False) -> None:
        if quiet:
            return
        self.console.print()
        self.console.print(escape(format_record(metadata)), highlight=False)


__all__ = ["RecordDisplay", "format_record"]
