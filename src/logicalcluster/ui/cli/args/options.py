"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final


@final
@dataclass(slots=True)
class ValidateArgs:
    """Command line arguments for the ``validate`` subcommand."""

    command: Literal["validate"]
    paths: list[str]
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class SplitArgs:
    """Command line arguments for the ``split`` subcommand."""

    command: Literal["split"]
    path: str
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class JoinArgs:
    """Command line arguments for the ``join`` subcommand."""

    command: Literal["join"]
    path: str
    segments: list[str]
    validate: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class RequestPathArgs:
    """Command line arguments for the ``request-path`` subcommand."""

    command: Literal["request-path"]
    path: str
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class AnnotationArgs:
    """Command line arguments for the ``annotation`` subcommand."""

    command: Literal["annotation"]
    manifest: str
    verbose: bool
    quiet: bool


CLIArgs = ValidateArgs | SplitArgs | JoinArgs | RequestPathArgs | AnnotationArgs

__all__ = [
    "AnnotationArgs",
    "CLIArgs",
    "JoinArgs",
    "RequestPathArgs",
    "SplitArgs",
    "ValidateArgs",
]
