"""src/id3handler/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse the tag service and clock across commands.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import date
from typing import Generic, TypeVar

from id3handler.config.config import Config
from id3handler.features.tags import Id3TagStore, TagService
from id3handler.ui.cli.args.options import CLIArgs

ArgsT = TypeVar("ArgsT", bound=CLIArgs)


class CommandExecutor(ABC, Generic[ArgsT]):
    """Base class for command execution."""

    args: ArgsT
    service: TagService
    today: Callable[[], date]

    def __init__(
        self,
        args: ArgsT,
        service: TagService | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            service: Tag service to use; built from the configuration when omitted.
            today: Clock used to bound plausible release years.
        """
        self.args = args
        if service is None:
            service = TagService(Id3TagStore(version=Config.load().id3_version))
        self.service = service
        self.today = today

    @abstractmethod
    def execute(self) -> bool:
        """Execute the command.

        Returns:
            True when the command succeeded.
        """
        pass
