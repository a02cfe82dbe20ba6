"""Tests for command line argument parser."""

import logging
from argparse import Namespace

import pytest
from pytest_mock import MockerFixture

from logicalcluster.ui.cli.args import (
    AnnotationArgs,
    ArgumentParser,
    JoinArgs,
    RequestPathArgs,
    SplitArgs,
    ValidateArgs,
)


def test_create_parser() -> None:
    """Argument parser should expose expected subcommands and options."""

    parser = ArgumentParser.create_parser()

    validate_args: Namespace = parser.parse_args(["validate", "root", "root:org"])
    assert validate_args.command == "validate"
    assert validate_args.paths == ["root", "root:org"]

    join_args: Namespace = parser.parse_args(["join", "root", "org", "team", "--validate"])
    assert join_args.path == "root"
    assert join_args.segments == ["org", "team"]
    assert join_args.validate

    with pytest.raises(SystemExit):
        _ = parser.parse_args(["split", "root", "--verbose", "--quiet"])


@pytest.fixture
def mocked_setup(mocker: MockerFixture):
    """Patch configuration loading and logger setup used by process_args."""

    mock_config = mocker.patch("logicalcluster.ui.cli.args.parser.Config")
    mock_setup_logger = mocker.patch("logicalcluster.ui.cli.args.parser.setup_logger")
    mock_config.load.return_value.log_file = None
    mock_config.load.return_value.console_level = logging.WARNING
    return mock_config, mock_setup_logger


def test_process_args_validate(mocked_setup) -> None:
    mock_config, mock_setup_logger = mocked_setup

    args = ArgumentParser.process_args(["validate", "root", "root:org"])

    assert args == ValidateArgs(command="validate", paths=["root", "root:org"], verbose=False, quiet=False)
    mock_config.load.assert_called_once()
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.WARNING
    assert mock_setup_logger.call_args.kwargs["log_file"] is None


@pytest.mark.parametrize(
    ("flag", "level"),
    [("--verbose", logging.DEBUG), ("--quiet", logging.ERROR)],
)
def test_process_args_verbosity_overrides_config(mocked_setup, flag: str, level: int) -> None:
    _, mock_setup_logger = mocked_setup

    _ = ArgumentParser.process_args(["split", "root:org", flag])

    assert mock_setup_logger.call_args.kwargs["console_level"] == level


def test_process_args_builds_typed_options(mocked_setup) -> None:
    _ = mocked_setup

    assert ArgumentParser.process_args(["split", "root:org"]) == SplitArgs(
        command="split", path="root:org", verbose=False, quiet=False
    )
    assert ArgumentParser.process_args(["join", "", "root"]) == JoinArgs(
        command="join", path="", segments=["root"], validate=False, verbose=False, quiet=False
    )
    assert ArgumentParser.process_args(["request-path", "root"]) == RequestPathArgs(
        command="request-path", path="root", verbose=False, quiet=False
    )
    assert ArgumentParser.process_args(["annotation", "-"]) == AnnotationArgs(
        command="annotation", manifest="-", verbose=False, quiet=False
    )
