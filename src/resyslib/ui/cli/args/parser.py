"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import final

from resyslib.config.config import Config
from resyslib.config.settings import CONSOLE_LOG_LEVEL
from resyslib.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from resyslib.ui.cli.args.options import (
    CLIArgs,
    ConcatArgs,
    DescribeArgs,
    FindArgs,
    IsFileArgs,
    PermissionsArgs,
    PlatformArgs,
    RemoveDirectoriesArgs,
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
            prog="resyslib",
            description="resyslib - file, directory and platform utilities.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug information",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        is_file_parser = subparsers.add_parser(
            "is-file",
            help="Report whether a path is, or looks like, a file",
        )
        _ = is_file_parser.add_argument("path", type=str, metavar="PATH")

        describe_parser = subparsers.add_parser(
            "describe",
            help="Show the name, extension and absolute path of a file",
        )
        _ = describe_parser.add_argument("path", type=str, metavar="PATH")

        rmdir_parser = subparsers.add_parser(
            "rmdir",
            help="Delete one or more directories",
        )
        _ = rmdir_parser.add_argument("paths", type=str, nargs="+", metavar="DIRECTORY")
        _ = rmdir_parser.add_argument(
            "--only-if-empty",
            action="store_true",
            help="Only delete directories that have no entries",
        )
        _ = rmdir_parser.add_argument(
            "--with-parent",
            action="store_true",
            help="Also delete the parent of every deleted directory",
        )
        _ = rmdir_parser.add_argument(
            "--stop-on-error",
            action="store_true",
            help="Stop at the first directory that cannot be deleted",
        )

        find_parser = subparsers.add_parser(
            "find",
            help="List files (or directories) below a root",
        )
        _ = find_parser.add_argument("root", type=str, metavar="ROOT")
        _ = find_parser.add_argument(
            "--pattern",
            type=str,
            default="*",
            help="Glob pattern matched against entry names (default: *)",
        )
        _ = find_parser.add_argument(
            "--dirs",
            action="store_true",
            help="List directories instead of files",
        )
        _ = find_parser.add_argument(
            "--no-recursive",
            action="store_true",
            help="Only inspect the immediate entries of ROOT",
        )

        concat_parser = subparsers.add_parser(
            "concat",
            help="Concatenate text files",
        )
        _ = concat_parser.add_argument("sources", type=str, nargs="+", metavar="SOURCE")
        _ = concat_parser.add_argument(
            "--output",
            "-o",
            type=str,
            help="Write the result to this file instead of the console",
        )
        _ = concat_parser.add_argument(
            "--separator",
            type=str,
            default="",
            help="Text inserted between files",
        )

        perms_parser = subparsers.add_parser(
            "perms",
            help="Parse, show or apply permission strings",
        )
        perms_group = perms_parser.add_mutually_exclusive_group(required=True)
        _ = perms_group.add_argument("--parse", metavar="STRING", help="Parse a permission string")
        _ = perms_group.add_argument("--show", metavar="PATH", help="Show the permissions of PATH")
        _ = perms_group.add_argument(
            "--apply",
            nargs=2,
            metavar=("STRING", "PATH"),
            help="Apply a permission string to PATH",
        )

        platform_parser = subparsers.add_parser(
            "platform",
            help="Detect the current platform",
        )
        _ = platform_parser.add_argument(
            "--android",
            action="store_true",
            help="Require Android and show its build details",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        quiet = bool(parsed_args.quiet)
        if quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = CONSOLE_LOG_LEVEL

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command
        logger.debug("Running command %s", command)

        if command == "is-file":
            return IsFileArgs(command="is-file", path=parsed_args.path, quiet=quiet)

        if command == "describe":
            return DescribeArgs(command="describe", path=parsed_args.path, quiet=quiet)

        if command == "rmdir":
            return RemoveDirectoriesArgs(
                command="rmdir",
                paths=[Path(p) for p in parsed_args.paths],
                only_if_empty=parsed_args.only_if_empty,
                with_parent=parsed_args.with_parent,
                stop_on_error=parsed_args.stop_on_error,
                quiet=quiet,
            )

        if command == "find":
            return FindArgs(
                command="find",
                root=Path(parsed_args.root),
                pattern=parsed_args.pattern,
                directories=parsed_args.dirs,
                recursive=not parsed_args.no_recursive,
                quiet=quiet,
            )

        if command == "concat":
            return ConcatArgs(
                command="concat",
                sources=[Path(s) for s in parsed_args.sources],
                output=Path(parsed_args.output) if parsed_args.output else None,
                separator=parsed_args.separator,
                quiet=quiet,
            )

        if command == "perms":
            return ArgumentParser._process_perms(parsed_args, quiet=quiet)

        return PlatformArgs(command="platform", android=parsed_args.android, quiet=quiet)

    @staticmethod
    def _process_perms(parsed_args: argparse.Namespace, *, quiet: bool) -> PermissionsArgs:
        if parsed_args.parse is not None:
            return PermissionsArgs(
                command="perms", action="parse", value=parsed_args.parse, path=None, quiet=quiet
            )
        if parsed_args.show is not None:
            return PermissionsArgs(
                command="perms", action="show", value=None, path=Path(parsed_args.show), quiet=quiet
            )
        value, path = parsed_args.apply
        return PermissionsArgs(
            command="perms", action="apply", value=value, path=Path(path), quiet=quiet
        )
