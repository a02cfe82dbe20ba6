"""Command line interface package."""

from logicalcluster.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
