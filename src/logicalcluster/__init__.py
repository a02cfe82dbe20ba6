"""Value types for naming and addressing logical clusters.

A :class:`Name` is a single cluster identifier; a :class:`Path` is a colon
separated list of segments such as ``root:accounting:us-west``.
"""

from logicalcluster.domain import (
    ANNOTATION_KEY,
    WILDCARD,
    ManifestObject,
    Name,
    Object,
    Path,
    from_object,
)

__version__ = "0.1.0"

__all__ = [
    "ANNOTATION_KEY",
    "ManifestObject",
    "Name",
    "Object",
    "Path",
    "WILDCARD",
    "__version__",
    "from_object",
]
