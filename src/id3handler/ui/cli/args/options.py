"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True, frozen=True)
class FieldValues:
    """Five explicit tag values given on the command line."""

    artist: str
    year: str
    album: str
    track: str
    title: str


@final
@dataclass(slots=True)
class PrintArgs:
    """Command line arguments for the ``print`` subcommand."""

    command: Literal["print"]
    path: Path
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class UpdateArgs:
    """Command line arguments for the ``update`` subcommand.

    ``source`` is the path exactly as typed. At most one of ``override`` and
    ``fields`` is set; with neither, the tags are inferred from ``source``.
    """

    command: Literal["update"]
    path: Path
    source: str
    verbose: bool
    quiet: bool
    override: str | None = None
    fields: FieldValues | None = None


@final
@dataclass(slots=True)
class RemoveArgs:
    """Command line arguments for the ``remove`` subcommand."""

    command: Literal["remove"]
    path: Path
    verbose: bool
    quiet: bool


CLIArgs = PrintArgs | UpdateArgs | RemoveArgs

__all__ = ["CLIArgs", "FieldValues", "PrintArgs", "RemoveArgs", "UpdateArgs"]
