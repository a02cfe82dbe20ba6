"""src/logicalcluster/ui/cli/commands/annotation.py
What: Read the logical cluster annotation from a JSON manifest.
Why: Let operators check which cluster an exported object belongs to.
"""

import json
import sys
from pathlib import Path as FilePath
from typing import Any, final

from typing_extensions import override

from logicalcluster.domain import ANNOTATION_KEY, ManifestObject, from_object
from logicalcluster.platform.logging import logger
from logicalcluster.ui.cli.args.options import AnnotationArgs
from logicalcluster.ui.cli.commands.executor import CommandExecutor


class ManifestError(ValueError):
    """Raised when a manifest is not a JSON object."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Invalid manifest {source}: {reason}")
        self.source: str = source
        self.reason: str = reason


def load_manifest(source: str) -> dict[str, Any]:
    """Load a JSON manifest from a file or ``-`` for standard input.

    Raises:
        ManifestError: If the content is not valid JSON or not an object.
        OSError: If the file cannot be read.
    """
    if source == "-":
        content = sys.stdin.read()
    else:
        content = FilePath(source).read_text(encoding="utf-8")

    try:
        manifest = json.loads(content)
    except json.JSONDecodeError as e:
        raise ManifestError(source, str(e)) from e

    if not isinstance(manifest, dict):
        raise ManifestError(source, "top-level value must be an object")
    return manifest


@final
class AnnotationCommand(CommandExecutor[AnnotationArgs]):
    """Print the logical cluster recorded on a manifest."""

    @override
    def execute(self) -> int:
        manifest = load_manifest(self.args.manifest)
        name = from_object(ManifestObject(manifest))
        if name.is_empty():
            logger.error("Manifest %s has no '%s' annotation", self.args.manifest, ANNOTATION_KEY)
            return 1

        if not name.is_valid():
            logger.warning(
                "annotation value is not a well-formed cluster name",
                extra={"cluster_path": name.value, "cluster_valid": False},
            )
        self.result_display.show_value(str(name))
        return 0
