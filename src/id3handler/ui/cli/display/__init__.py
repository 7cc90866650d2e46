"""Display management for CLI interface."""

from id3handler.ui.cli.display.record import RecordDisplay, format_record

__all__ = ["RecordDisplay", "format_record"]
