"""Fixtures for CLI command tests."""

from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

from logicalcluster.ui.cli.display import ResultDisplay


@pytest.fixture
def output() -> StringIO:
    """Buffer receiving command output."""

    return StringIO()


@pytest.fixture
def display(output: StringIO) -> ResultDisplay:
    """Result display writing plain text into ``output``."""

    return ResultDisplay(Console(file=output, width=200, color_system=None))
