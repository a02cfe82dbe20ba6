"""
Summary: Annotation-based lookup of the logical cluster owning an object.
Why: Read the cluster annotation from any object without a Kubernetes client dependency.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Final, Protocol, final, runtime_checkable

from logicalcluster.domain.name import Name

# Annotation key used to denote an object's logical cluster.
ANNOTATION_KEY: Final[str] = "kcp.dev/cluster"


@runtime_checkable
class Object(Protocol):
    """Minimal view of an object carrying metadata annotations."""

    def get_annotations(self) -> Mapping[str, str] | None:
        """Return the object's annotations, or ``None`` when it has none."""
        ...


def from_object(obj: Object) -> Name:
    """Return the logical cluster recorded on ``obj``.

    Args:
        obj: Any object exposing ``get_annotations``.

    Returns:
        Name: The annotated cluster name, or an empty name when the
        annotation is missing.
    """
    annotations = obj.get_annotations() or {}
    return Name(annotations.get(ANNOTATION_KEY, ""))


@final
@dataclass(frozen=True, slots=True)
class ManifestObject:
    """Adapter exposing a Kubernetes-style manifest mapping as an :class:`Object`."""

    manifest: Mapping[str, Any] = field(default_factory=dict)

    def get_annotations(self) -> Mapping[str, str] | None:
        """Return string annotations found under ``metadata.annotations``."""

        metadata = self.manifest.get("metadata")
        if not isinstance(metadata, Mapping):
            return None
        annotations = metadata.get("annotations")
        if not isinstance(annotations, Mapping):
            return None
        return {
            key: value
            for key, value in annotations.items()
            if isinstance(key, str) and isinstance(value, str)
        }


__all__ = ["ANNOTATION_KEY", "ManifestObject", "Object", "from_object"]
