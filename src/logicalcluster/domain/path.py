"""
Summary: Path value object addressing a logical cluster in the hierarchy.
Why: Centralize split, join and validation rules for colon separated cluster paths.
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from typing import Final, final

from typing_extensions import override

from logicalcluster.domain.grammar import (
    REQUEST_PATH_PREFIX,
    SEPARATOR,
    WILDCARD_LITERAL,
    matches_path,
)
from logicalcluster.domain.name import Name


@final
@dataclass(frozen=True, slots=True, order=True)
class Path:
    """Colon separated list of words describing a logical cluster location.

    Paths work like file paths in a file system. Given the hierarchy::

        root/                       (62208dab)
        ├── accounting              (c8a942c5)
        │   └── us-west             (33bab531)
        │       └── invoices        (f5865fce)
        └── management              (e7e08986)
            └── us-west-invoices    (f5865fce)

    each of the following addresses the ``invoices`` cluster:

        - ``root:accounting:us-west:invoices``
        - ``62208dab:accounting:us-west:invoices``
        - ``c8a942c5:us-west:invoices``
        - ``33bab531:invoices``
        - ``f5865fce``

    Every operation is a plain string operation; nothing is validated unless
    :meth:`is_valid` is called.
    """

    value: str = ""

    @classmethod
    def new_validated(cls, value: str) -> tuple[Path, bool]:
        """Create a path and report whether it is valid.

        Args:
            value: Raw path string.

        Returns:
            tuple[Path, bool]: The path and the result of :meth:`is_valid`.
        """
        path = cls(value)
        return path, path.is_valid()

    def is_empty(self) -> bool:
        """Return whether the stored path is unset."""
        return self.value == ""

    def name(self) -> tuple[Name, bool]:
        """Convert the path into a :class:`Name` when it has no parent.

        Returns:
            tuple[Name, bool]: The name and ``True``, or an empty name and
            ``False`` for paths with more than one segment.
        """
        _, has_parent = self.parent()
        if has_parent:
            return Name(), False
        return Name(self.value), True

    def request_path(self) -> str:
        """Return the URL path used to reach the API of this cluster."""
        return posixpath.normpath(REQUEST_PATH_PREFIX + "/" + self.value)

    def parent(self) -> tuple[Path, bool]:
        """Return the path with all but the last segment.

        The flag is ``True`` only when the parent is non-empty, so ``":a"``
        reports no parent just like ``"a"`` does.
        """
        parent, _ = self.split()
        return parent, parent.value != ""

    def split(self) -> tuple[Path, str]:
        """Split the path immediately following the final separator.

        Without a separator the parent is empty and the whole value is
        returned as the name. Consecutive separators are kept as they are:
        ``"foo::baz"`` splits into ``"foo:"`` and ``"baz"``.

        Returns:
            tuple[Path, str]: Parent path and trailing segment.
        """
        parent, separator, name = self.value.rpartition(SEPARATOR)
        if not separator:
            return Path(), self.value
        return Path(parent), name

    def base(self) -> str:
        """Return the last segment of the path."""
        _, name = self.split()
        return name

    def join(self, name: str) -> Path:
        """Append a segment to the path.

        Args:
            name: Segment to add; it is not validated.

        Returns:
            Path: ``name`` alone when this path is empty, otherwise the
            current value and ``name`` separated by a colon.
        """
        if self.value == "":
            return Path(name)
        return Path(self.value + SEPARATOR + name)

    def has_prefix(self, other: Path) -> bool:
        """Return whether the raw string starts with ``other``.

        The check is not segment aware: ``elephant2`` has the prefix
        ``elephant``.
        """
        return self.value.startswith(other.value)

    def is_valid(self) -> bool:
        """Return whether the path is the wildcard or a list of valid segments.

        Each segment starts and ends with a lower-case letter or digit and
        contains only lower-case letters, digits and hyphens.
        """
        return self == WILDCARD or matches_path(self.value)

    @override
    def __str__(self) -> str:
        return self.value


# Path for requests that span many logical clusters.
WILDCARD: Final[Path] = Path(WILDCARD_LITERAL)


__all__ = ["Path", "WILDCARD"]
