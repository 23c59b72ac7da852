"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import final

from protostar.config.config import Config
from protostar.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from protostar.ui.cli.args.options import AppsArgs, CLIArgs, IconArgs, LaunchArgs


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from exc
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {number}")
    return number


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        common = argparse.ArgumentParser(add_help=False)
        _ = common.add_argument(
            "--verbose",
            action="store_true",
            help="Show icon resolution details",
        )
        _ = common.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

        parser = argparse.ArgumentParser(
            prog="protostar",
            description="Protostar - discover desktop applications, resolve their icons and launch them.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        subparsers = parser.add_subparsers(dest="command", required=True)

        apps_parser = subparsers.add_parser(
            "apps",
            parents=[common],
            help="List installed applications with their resolved icons",
        )
        _ = apps_parser.add_argument(
            "--size",
            type=_positive_int,
            help="Icon size in pixels (defaults to the configured size)",
        )
        _ = apps_parser.add_argument(
            "--all",
            action="store_true",
            help="Include applications marked NoDisplay or Hidden",
        )

        icon_parser = subparsers.add_parser(
            "icon",
            parents=[common],
            help="Resolve the icon of one application",
        )
        _ = icon_parser.add_argument(
            "query",
            type=str,
            help="Desktop file id (e.g. org.mozilla.firefox) or application name",
            metavar="APP",
        )
        _ = icon_parser.add_argument(
            "--size",
            type=_positive_int,
            help="Icon size in pixels (defaults to the configured size)",
        )
        _ = icon_parser.add_argument(
            "--prefer-3d",
            action="store_true",
            help="Prefer glTF/GLB model icons when the theme provides them",
        )

        launch_parser = subparsers.add_parser(
            "launch",
            parents=[common],
            help="Launch one application",
        )
        _ = launch_parser.add_argument(
            "query",
            type=str,
            help="Desktop file id or application name",
            metavar="APP",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments and configure logging.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "apps":
            return AppsArgs(
                command="apps",
                size=parsed_args.size,
                show_all=bool(parsed_args.all),
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "icon":
            return IconArgs(
                command="icon",
                query=parsed_args.query,
                size=parsed_args.size,
                prefer_3d=bool(parsed_args.prefer_3d),
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "launch":
            return LaunchArgs(
                command="launch",
                query=parsed_args.query,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)
