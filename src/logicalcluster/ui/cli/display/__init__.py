"""Display helpers for CLI output."""

from logicalcluster.ui.cli.display.result import ResultDisplay

__all__ = ["ResultDisplay"]
