"""Rich console handler with cluster path rendering.

Where: platform/logging/handlers.py
What: Render log records that carry a ``cluster_path`` extra with styled separators.
Why: Keep hierarchy boundaries readable in terminal output.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text

from logicalcluster.domain.grammar import SEPARATOR, WILDCARD_LITERAL


class ClusterPathRichHandler(RichHandler):
    """Custom Rich handler that highlights logical cluster paths."""

    _VALIDITY_STYLES: ClassVar[dict[bool, tuple[str, str]]] = {
        True: ("✅", "green"),
        False: ("❌", "red"),
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    @staticmethod
    def style_cluster_path(path_string: str) -> Text:
        """Apply Rich styling to a colon separated cluster path."""

        text = Text()
        if path_string == "":
            _ = text.append("<empty>", style=Style(color="bright_black", italic=True))
            return text
        if path_string == WILDCARD_LITERAL:
            _ = text.append(path_string, style=Style(color="cyan", bold=True))
            return text

        for char in path_string:
            if char == SEPARATOR:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_cluster_message(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render records tagged with a cluster path."""

        cluster_path = getattr(record, "cluster_path", None)
        if not isinstance(cluster_path, str):
            return None

        text = Text()
        valid = getattr(record, "cluster_valid", None)
        if isinstance(valid, bool):
            icon, color = self._VALIDITY_STYLES[valid]
            _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        _ = text.append_text(self.style_cluster_path(cluster_path))
        if message:
            _ = text.append(" ")
            _ = text.append(message)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for cluster path records."""

        cluster_text = self._render_cluster_message(record, message)
        if cluster_text is not None:
            return cluster_text

        return super().render_message(record, message)


__all__ = ["ClusterPathRichHandler"]
