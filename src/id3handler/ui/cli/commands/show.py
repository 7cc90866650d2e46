"""Print the tags stored in a file."""

from typing import override

from id3handler.ui.cli.args.options import PrintArgs
from id3handler.ui.cli.commands.executor import CommandExecutor
from id3handler.ui.cli.display import RecordDisplay


class PrintCommand(CommandExecutor[PrintArgs]):
    """Command for the ``print`` subcommand."""

    @override
    def execute(self) -> bool:
        metadata = self.service.show(self.args.path)
        RecordDisplay().show(metadata, quiet=self.args.quiet)
        return True
