"""
Summary: Compiled grammars and reserved literals for logical cluster names and paths.
Why: Keep the name and path validators side by side without merging them.
"""

from __future__ import annotations

import re
from typing import Final

SEPARATOR: Final[str] = ":"
WILDCARD_LITERAL: Final[str] = "*"
REQUEST_PATH_PREFIX: Final[str] = "/clusters"

# Name values are 2 to 63 characters; single characters do not match.
CLUSTER_NAME_FORMAT: Final[str] = r"[a-z0-9][a-z0-9-]{0,61}[a-z0-9]"

# Path segments are 1 to 63 characters.
PATH_SEGMENT_FORMAT: Final[str] = r"[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?"

CLUSTER_NAME_PATTERN: Final[re.Pattern[str]] = re.compile(CLUSTER_NAME_FORMAT)
CLUSTER_PATH_PATTERN: Final[re.Pattern[str]] = re.compile(
    PATH_SEGMENT_FORMAT + "(?:" + re.escape(SEPARATOR) + PATH_SEGMENT_FORMAT + ")*"
)


def matches_name(value: str) -> bool:
    """Return whether ``value`` is a well-formed cluster name."""

    return CLUSTER_NAME_PATTERN.fullmatch(value) is not None


def matches_path(value: str) -> bool:
    """Return whether ``value`` is a colon separated list of well-formed segments."""

    return CLUSTER_PATH_PATTERN.fullmatch(value) is not None


__all__ = [
    "CLUSTER_NAME_FORMAT",
    "CLUSTER_NAME_PATTERN",
    "CLUSTER_PATH_PATTERN",
    "PATH_SEGMENT_FORMAT",
    "REQUEST_PATH_PREFIX",
    "SEPARATOR",
    "WILDCARD_LITERAL",
    "matches_name",
    "matches_path",
]
