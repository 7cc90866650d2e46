"""Command line argument handling package."""

from id3handler.ui.cli.args.options import CLIArgs, FieldValues, PrintArgs, RemoveArgs, UpdateArgs
from id3handler.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "CLIArgs", "FieldValues", "PrintArgs", "RemoveArgs", "UpdateArgs"]
