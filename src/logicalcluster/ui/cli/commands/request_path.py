"""Request path command implementation."""

from typing import final

from typing_extensions import override

from logicalcluster.domain import Path
from logicalcluster.ui.cli.args.options import RequestPathArgs
from logicalcluster.ui.cli.commands.executor import CommandExecutor


@final
class RequestPathCommand(CommandExecutor[RequestPathArgs]):
    """Print the API request path for a cluster path."""

    @override
    def execute(self) -> int:
        self.result_display.show_value(Path(self.args.path).request_path())
        return 0
