"""Command execution package for CLI."""

from id3handler.ui.cli.commands.executor import CommandExecutor
from id3handler.ui.cli.commands.remove import RemoveCommand
from id3handler.ui.cli.commands.show import PrintCommand
from id3handler.ui.cli.commands.update import UpdateCommand

__all__ = ["CommandExecutor", "PrintCommand", "RemoveCommand", "UpdateCommand"]
