"""Tests for the command processor entry point."""

from __future__ import annotations

import pytest
from pytest_mock import MockerFixture

from logicalcluster.ui.cli import CommandProcessor
from logicalcluster.ui.cli.args.options import JoinArgs, SplitArgs, ValidateArgs
from logicalcluster.ui.cli.commands import JoinCommand, SplitCommand, ValidateCommand


def test_build_command_dispatches_on_args_type() -> None:
    assert isinstance(
        CommandProcessor.build_command(ValidateArgs("validate", ["root"], False, False)),
        ValidateCommand,
    )
    assert isinstance(
        CommandProcessor.build_command(SplitArgs("split", "root", False, False)),
        SplitCommand,
    )
    assert isinstance(
        CommandProcessor.build_command(JoinArgs("join", "root", ["org"], False, False, False)),
        JoinCommand,
    )


@pytest.fixture
def no_config(mocker: MockerFixture) -> None:
    """Keep the processor away from real configuration and log files."""

    mock_config = mocker.patch("logicalcluster.ui.cli.args.parser.Config")
    mock_config.load.return_value.log_file = None
    mock_config.load.return_value.console_level = 20
    _ = mocker.patch("logicalcluster.ui.cli.args.parser.setup_logger")


def test_process_command_success_returns(no_config: None) -> None:
    _ = no_config

    CommandProcessor.process_command(["validate", "root:org"])


def test_process_command_exits_with_command_code(no_config: None) -> None:
    _ = no_config

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["validate", "root::org"])

    assert excinfo.value.code == 1


def test_process_command_handles_unexpected_errors(no_config: None, mocker: MockerFixture) -> None:
    _ = no_config
    mock_logger = mocker.patch("logicalcluster.ui.cli.cli.logger")

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["annotation", "/nonexistent/manifest.json"])

    assert excinfo.value.code == 1
    mock_logger.error.assert_called_once()


def test_process_command_handles_keyboard_interrupt(no_config: None, mocker: MockerFixture) -> None:
    _ = no_config
    _ = mocker.patch(
        "logicalcluster.ui.cli.cli.CommandProcessor.build_command",
        side_effect=KeyboardInterrupt,
    )

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["split", "root"])

    assert excinfo.value.code == 130
