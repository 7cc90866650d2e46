"""Remove the tags stored in a file."""

from typing import override

from id3handler.ui.cli.args.options import RemoveArgs
from id3handler.ui.cli.commands.executor import CommandExecutor


class RemoveCommand(CommandExecutor[RemoveArgs]):
    """Command for the ``remove`` subcommand."""

    @override
    def execute(self) -> bool:
        result = self.service.remove(self.args.path, verbose=self.args.verbose)
        return result.success
