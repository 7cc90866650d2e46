"""Command line interface package."""

from id3handler.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
