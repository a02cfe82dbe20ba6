"""Command execution package for CLI."""

from logicalcluster.ui.cli.commands.annotation import AnnotationCommand, ManifestError
from logicalcluster.ui.cli.commands.executor import CommandExecutor
from logicalcluster.ui.cli.commands.join import JoinCommand
from logicalcluster.ui.cli.commands.request_path import RequestPathCommand
from logicalcluster.ui.cli.commands.split import SplitCommand
from logicalcluster.ui.cli.commands.validate import ValidateCommand

__all__ = [
    "AnnotationCommand",
    "CommandExecutor",
    "JoinCommand",
    "ManifestError",
    "RequestPathCommand",
    "SplitCommand",
    "ValidateCommand",
]
