"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import final

from logicalcluster.config.config import Config
from logicalcluster.platform.logging import logger, setup_logger
from logicalcluster.ui.cli.args.options import (
    AnnotationArgs,
    CLIArgs,
    JoinArgs,
    RequestPathArgs,
    SplitArgs,
    ValidateArgs,
)


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="logicalcluster",
            description="Inspect and validate logical cluster paths such as root:org:team.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        validate_parser = subparsers.add_parser(
            "validate",
            help="Check whether one or more paths are valid",
        )
        _ = validate_parser.add_argument(
            "paths",
            nargs="+",
            metavar="PATH",
            help="Logical cluster paths to validate",
        )
        ArgumentParser._add_verbosity_flags(validate_parser)

        split_parser = subparsers.add_parser(
            "split",
            help="Split a path into its parent and last segment",
        )
        _ = split_parser.add_argument("path", metavar="PATH", help="Path to split")
        ArgumentParser._add_verbosity_flags(split_parser)

        join_parser = subparsers.add_parser(
            "join",
            help="Append segments to a path",
        )
        _ = join_parser.add_argument("path", metavar="PATH", help="Path to extend (may be empty)")
        _ = join_parser.add_argument(
            "segments",
            nargs="+",
            metavar="SEGMENT",
            help="Segments appended in order",
        )
        _ = join_parser.add_argument(
            "--validate",
            action="store_true",
            help="Fail when the joined path is not valid",
        )
        ArgumentParser._add_verbosity_flags(join_parser)

        request_parser = subparsers.add_parser(
            "request-path",
            help="Render the /clusters/... URL path for a cluster path",
        )
        _ = request_parser.add_argument("path", metavar="PATH", help="Path to render")
        ArgumentParser._add_verbosity_flags(request_parser)

        annotation_parser = subparsers.add_parser(
            "annotation",
            help="Read the logical cluster annotation from a JSON manifest",
        )
        _ = annotation_parser.add_argument(
            "manifest",
            metavar="FILE",
            help="JSON manifest file, or '-' for standard input",
        )
        ArgumentParser._add_verbosity_flags(annotation_parser)

        return parser

    @staticmethod
    def _add_verbosity_flags(parser: argparse.ArgumentParser) -> None:
        """Apply shared verbosity switches to a subparser."""

        group = parser.add_mutually_exclusive_group()
        _ = group.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug information",
        )
        _ = group.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all log output except errors",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If the arguments cannot be parsed.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        configuration = Config.load()
        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = configuration.console_level

        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        command: str = parsed_args.command

        if command == "validate":
            return ValidateArgs(
                command="validate",
                paths=list(parsed_args.paths),
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "split":
            return SplitArgs(
                command="split",
                path=parsed_args.path,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "join":
            return JoinArgs(
                command="join",
                path=parsed_args.path,
                segments=list(parsed_args.segments),
                validate=bool(parsed_args.validate),
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "request-path":
            return RequestPathArgs(
                command="request-path",
                path=parsed_args.path,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "annotation":
            return AnnotationArgs(
                command="annotation",
                manifest=parsed_args.manifest,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)
