"""
Summary: Name value object identifying a single logical cluster.
Why: Give cluster identifiers a type of their own while keeping validation opt-in.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, final

from typing_extensions import override

from logicalcluster.domain.grammar import matches_name

if TYPE_CHECKING:
    from logicalcluster.domain.path import Path


@final
@dataclass(frozen=True, slots=True)
class Name:
    """Value that uniquely identifies a logical cluster.

    A name can be used to reach a cluster through ``/clusters/<name>`` and
    forms part of a storage key. Construction never validates; call
    :meth:`is_valid` when a well-formed value is required.
    """

    value: str = ""

    def path(self) -> Path:
        """Return a single-segment :class:`Path` holding this name.

        Returns:
            Path: Path wrapping the stored value, valid or not.
        """
        from logicalcluster.domain.path import Path

        return Path(self.value)

    def is_valid(self) -> bool:
        """Return whether the stored value matches the cluster name format.

        A valid name is 2 to 63 characters long, starts and ends with a
        lower-case letter or digit and otherwise contains only lower-case
        letters, digits and hyphens.
        """
        return matches_name(self.value)

    def is_empty(self) -> bool:
        """Return whether the stored value is unset."""
        return self.value == ""

    @override
    def __str__(self) -> str:
        return self.value


__all__ = ["Name"]
