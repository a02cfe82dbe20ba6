"""Smoke tests for unified entry points.

These tests assert that `python -m logicalcluster` and the console script
both resolve to the CLI's `main` function exposed under `logicalcluster.ui.cli`.
"""

from importlib import import_module


def test_module_entry_point_exposes_main() -> None:
    """`python -m logicalcluster` path exposes a `main` callable."""
    m = import_module("logicalcluster.__main__")
    assert hasattr(m, "main")


def test_console_script_target_exposes_main() -> None:
    """Console script points to `logicalcluster.ui.cli:main` and is importable."""
    m = import_module("logicalcluster.ui.cli")
    assert hasattr(m, "main")


def test_package_exports_value_types() -> None:
    """The top-level package re-exports the value types."""
    m = import_module("logicalcluster")
    assert m.Path("root").join("org") == m.Path("root:org")
    assert m.WILDCARD.is_valid()
