"""Command line interface for logicalcluster."""

import sys
from collections.abc import Sequence
from typing import Any, final

from logicalcluster.platform.logging import logger
from logicalcluster.ui.cli.args import (
    AnnotationArgs,
    ArgumentParser,
    CLIArgs,
    JoinArgs,
    RequestPathArgs,
    SplitArgs,
    ValidateArgs,
)
from logicalcluster.ui.cli.commands import (
    AnnotationCommand,
    CommandExecutor,
    JoinCommand,
    RequestPathCommand,
    SplitCommand,
    ValidateCommand,
)


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def build_command(args: CLIArgs) -> CommandExecutor[Any]:
        """Return the executor matching the parsed arguments."""

        if isinstance(args, ValidateArgs):
            return ValidateCommand(args)
        if isinstance(args, SplitArgs):
            return SplitCommand(args)
        if isinstance(args, JoinArgs):
            return JoinCommand(args)
        if isinstance(args, RequestPathArgs):
            return RequestPathCommand(args)
        assert isinstance(args, AnnotationArgs)
        return AnnotationCommand(args)

    @staticmethod
    def process_command(args_list: Sequence[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list)
            exit_code = CommandProcessor.build_command(args).execute()
            if exit_code != 0:
                sys.exit(exit_code)

        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failing commands call
        ``sys.exit(...)`` instead of returning.
    """
    CommandProcessor.process_command()
    return 0
