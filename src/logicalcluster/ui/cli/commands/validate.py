"""Validate command implementation."""

from typing import final

from typing_extensions import override

from logicalcluster.domain import Path
from logicalcluster.platform.logging import logger
from logicalcluster.ui.cli.args.options import ValidateArgs
from logicalcluster.ui.cli.commands.executor import CommandExecutor


@final
class ValidateCommand(CommandExecutor[ValidateArgs]):
    """Report whether each given path is valid."""

    @override
    def execute(self) -> int:
        results: list[tuple[Path, bool]] = []
        for raw in self.args.paths:
            path, valid = Path.new_validated(raw)
            logger.info(
                "valid" if valid else "invalid",
                extra={"cluster_path": path.value, "cluster_valid": valid},
            )
            results.append((path, valid))

        self.result_display.show_validation(results)

        invalid = sum(1 for _, valid in results if not valid)
        if invalid:
            logger.error("%d of %d paths are invalid", invalid, len(results))
            return 1
        return 0
