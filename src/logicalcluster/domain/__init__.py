# Path: `src/logicalcluster/domain/__init__.py`
# Summary: Export logical cluster value objects and annotation helpers.
# Why: Provide a stable import surface for the CLI and tests.

from .annotations import ANNOTATION_KEY, ManifestObject, Object, from_object
from .grammar import REQUEST_PATH_PREFIX, SEPARATOR, WILDCARD_LITERAL
from .name import Name
from .path import WILDCARD, Path

__all__ = [
    "ANNOTATION_KEY",
    "ManifestObject",
    "Name",
    "Object",
    "Path",
    "REQUEST_PATH_PREFIX",
    "SEPARATOR",
    "WILDCARD",
    "WILDCARD_LITERAL",
    "from_object",
]
