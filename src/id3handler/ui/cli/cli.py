"""Command line interface for id3handler."""

import sys
from typing import Any, final

from id3handler.platform.logging import logger
from id3handler.ui.cli.args import ArgumentParser
from id3handler.ui.cli.args.options import CLIArgs, PrintArgs, RemoveArgs, UpdateArgs
from id3handler.ui.cli.commands import CommandExecutor, PrintCommand, RemoveCommand, UpdateCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def build_command(args: CLIArgs) -> CommandExecutor[Any]:
        """Select the executor matching the parsed subcommand."""
        if isinstance(args, PrintArgs):
            return PrintCommand(args)
        if isinstance(args, UpdateArgs):
            return UpdateCommand(args)
        assert isinstance(args, RemoveArgs)
        return RemoveCommand(args)

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            if not CommandProcessor.build_command(args).execute():
                sys.exit(1)

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
