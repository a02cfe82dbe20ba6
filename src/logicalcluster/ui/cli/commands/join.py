"""Join command implementation."""

from typing import final

from typing_extensions import override

from logicalcluster.domain import Path
from logicalcluster.platform.logging import logger
from logicalcluster.ui.cli.args.options import JoinArgs
from logicalcluster.ui.cli.commands.executor import CommandExecutor


@final
class JoinCommand(CommandExecutor[JoinArgs]):
    """Append segments to a path and print the result."""

    @override
    def execute(self) -> int:
        path = Path(self.args.path)
        for segment in self.args.segments:
            path = path.join(segment)

        self.result_display.show_value(str(path))

        if self.args.validate and not path.is_valid():
            logger.error(
                "joined path is invalid",
                extra={"cluster_path": path.value, "cluster_valid": False},
            )
            return 1
        return 0
