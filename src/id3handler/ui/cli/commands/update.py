"""src/id3handler/ui/cli/commands/update.py
What: Choose the source of new tags and hand them to the tag service.
Why: Explicit values win over an override string, which wins over the file path.
"""

from typing import override

from id3handler.features.parsing import CompositeMetadata, MetadataAssembler
from id3handler.ui.cli.args.options import UpdateArgs
from id3handler.ui.cli.commands.executor import CommandExecutor


class UpdateCommand(CommandExecutor[UpdateArgs]):
    """Command for the ``update`` subcommand."""

    def build_metadata(self) -> CompositeMetadata:
        """Resolve the tag values requested on the command line."""
        fields = self.args.fields
        if fields is not None:
            return MetadataAssembler.force(
                fields.artist, fields.year, fields.album, fields.track, fields.title
            )

        source = self.args.override if self.args.override is not None else self.args.source
        return MetadataAssembler.parse(source, current_year=self.today().year)

    @override
    def execute(self) -> bool:
        result = self.service.update(
            self.args.path,
            self.build_metadata(),
            verbose=self.args.verbose,
        )
        return result.success
