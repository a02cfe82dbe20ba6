"""Command line argument handling package."""

from logicalcluster.ui.cli.args.parser import ArgumentParser
from logicalcluster.ui.cli.args.options import (
    AnnotationArgs,
    CLIArgs,
    JoinArgs,
    RequestPathArgs,
    SplitArgs,
    ValidateArgs,
)

__all__ = [
    "AnnotationArgs",
    "ArgumentParser",
    "CLIArgs",
    "JoinArgs",
    "RequestPathArgs",
    "SplitArgs",
    "ValidateArgs",
]
