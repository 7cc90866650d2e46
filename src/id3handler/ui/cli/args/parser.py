"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Final, final

from id3handler.config.config import Config
from id3handler.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from id3handler.ui.cli.args.options import CLIArgs, FieldValues, PrintArgs, RemoveArgs, UpdateArgs

_EPILOG: Final[str] = """\
OVERRIDE format: "ARTIST - YEAR - ALBUM / TRACK - TITLE"
Please don't use - or / other than as separators.

Alternatively give each value as its own argument, in this order (all required):
  "ARTIST" "YEAR" "ALBUM" "TRACK" "TITLE"

Examples:
  id3handler print "PATH"
  id3handler remove "PATH"
  id3handler update "PATH"
  id3handler update "PATH" "STRING AS PATH"
  id3handler update "PATH" "ARTIST" "YEAR" "ALBUM" "TRACK" "TITLE"
"""

FIELD_VALUE_COUNT: Final[int] = 5


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="id3handler",
            description="ID3 tag handler - read, infer from the path, and write or remove ID3 tags.",
            epilog=_EPILOG,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        print_parser = subparsers.add_parser(
            "print",
            help="Print tag information from PATH",
        )
        ArgumentParser._configure_common(print_parser)

        update_parser = subparsers.add_parser(
            "update",
            help="Update file tag information based on path and filename",
            epilog=_EPILOG,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        ArgumentParser._configure_common(update_parser)
        _ = update_parser.add_argument(
            "values",
            nargs="*",
            metavar="VALUE",
            help="Either one OVERRIDE string or ARTIST YEAR ALBUM TRACK TITLE",
        )

        remove_parser = subparsers.add_parser(
            "remove",
            help="Remove the ID3 tag completely",
        )
        ArgumentParser._configure_common(remove_parser)

        return parser

    @staticmethod
    def _configure_common(parser: argparse.ArgumentParser) -> None:
        """Apply the arguments every subcommand shares."""

        _ = parser.add_argument(
            "path",
            type=str,
            help="Path to the audio file",
            metavar="PATH",
        )
        _ = parser.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Print out all info, including files that need no change",
        )
        _ = parser.add_argument(
            "-q",
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If the file doesn't exist (1) or the values are malformed (2).
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        path = Path(parsed_args.path)
        if not path.is_file():
            logger.error("File doesn't exist: '%s'", path)
            sys.exit(1)

        command: str = parsed_args.command
        if command == "print":
            return PrintArgs(
                command="print",
                path=path,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )
        if command == "remove":
            return RemoveArgs(
                command="remove",
                path=path,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )
        return ArgumentParser._process_update(parser, parsed_args, path)

    @staticmethod
    def _process_update(
        parser: argparse.ArgumentParser,
        parsed_args: argparse.Namespace,
        path: Path,
    ) -> UpdateArgs:
        values: list[str] = parsed_args.values
        args = UpdateArgs(
            command="update",
            path=path,
            source=parsed_args.path,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

        if not values:
            return args

        if len(values) == 1:
            if "/" not in values[0]:
                parser.error(
                    "an override string must look like 'ARTIST - YEAR - ALBUM / TRACK - TITLE'"
                )
            args.override = values[0]
            return args

        if len(values) != FIELD_VALUE_COUNT:
            parser.error(
                f"expected {FIELD_VALUE_COUNT} values (ARTIST YEAR ALBUM TRACK TITLE), got {len(values)}"
            )
        args.fields = FieldValues(*values)
        return args
