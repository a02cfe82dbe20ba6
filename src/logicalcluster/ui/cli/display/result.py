"""Result display functionality for CLI commands."""

from typing import final

from rich.console import Console
from rich.table import Table
from rich.text import Text

from logicalcluster.domain import Path
from logicalcluster.platform.logging import ClusterPathRichHandler


@final
class ResultDisplay:
    """Print command results to standard output."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize the display.

        Args:
            console: Rich console to print to. Defaults to standard output.
        """
        self.console = console if console is not None else Console(soft_wrap=True)

    def show_value(self, value: str) -> None:
        """Print a single plain value."""

        self.console.print(Text(value), highlight=False)

    def show_split(self, parent: Path, base: str) -> None:
        """Print the parent and base of a split path.

        Args:
            parent: Parent path, possibly empty.
            base: Last segment of the path.
        """
        table = Table(show_header=False, box=None, pad_edge=False)
        table.add_column("field", style="bold")
        table.add_column("value")
        table.add_row("parent", self._styled(str(parent)))
        table.add_row("base", Text(base))
        self.console.print(table)

    def show_validation(self, results: list[tuple[Path, bool]]) -> None:
        """Print a validity table for the given paths."""

        table = Table(show_header=True, box=None, pad_edge=False)
        table.add_column("path")
        table.add_column("valid")
        for path, valid in results:
            table.add_row(
                self._styled(str(path)),
                Text("yes", style="green") if valid else Text("no", style="red"),
            )
        self.console.print(table)

    @staticmethod
    def _styled(value: str) -> Text:
        if value == "":
            return Text()
        return ClusterPathRichHandler.style_cluster_path(value)


__all__ = ["ResultDisplay"]
