"""Split command implementation."""

from typing import final

from typing_extensions import override

from logicalcluster.domain import Path
from logicalcluster.platform.logging import logger
from logicalcluster.ui.cli.args.options import SplitArgs
from logicalcluster.ui.cli.commands.executor import CommandExecutor


@final
class SplitCommand(CommandExecutor[SplitArgs]):
    """Show the parent and last segment of a path."""

    @override
    def execute(self) -> int:
        path = Path(self.args.path)
        parent, base = path.split()
        _, has_parent = path.parent()
        if not has_parent:
            logger.debug("has no parent", extra={"cluster_path": path.value})
        self.result_display.show_split(parent, base)
        return 0
