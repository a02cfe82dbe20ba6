"""src/logicalcluster/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse presentation helpers across commands.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from logicalcluster.ui.cli.args.options import CLIArgs
from logicalcluster.ui.cli.display.result import ResultDisplay

ArgsT = TypeVar("ArgsT", bound=CLIArgs)


class CommandExecutor(ABC, Generic[ArgsT]):
    """Base class for command execution."""

    args: ArgsT
    result_display: ResultDisplay

    def __init__(self, args: ArgsT, result_display: ResultDisplay | None = None) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            result_display: Output sink for command results.
        """
        self.args = args
        self.result_display = result_display if result_display is not None else ResultDisplay()

    @abstractmethod
    def execute(self) -> int:
        """Execute the command.

        Returns:
            int: Process exit code.
        """
        pass
