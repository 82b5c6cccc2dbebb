"""Command line interface for resyslib."""

import sys
from typing import final

from resyslib.features.io import InvalidPermissionStringError
from resyslib.features.runtime import PlatformDetectionError
from resyslib.platform.logging import logger
from resyslib.ui.cli.args import (
    ArgumentParser,
    CLIArgs,
    ConcatArgs,
    DescribeArgs,
    FindArgs,
    IsFileArgs,
    PermissionsArgs,
    RemoveDirectoriesArgs,
)
from resyslib.ui.cli.commands import (
    ConcatCommand,
    DescribeCommand,
    FindCommand,
    IsFileCommand,
    PermissionsCommand,
    PlatformCommand,
    RemoveDirectoriesCommand,
)

Command = (
    IsFileCommand
    | DescribeCommand
    | RemoveDirectoriesCommand
    | FindCommand
    | ConcatCommand
    | PermissionsCommand
    | PlatformCommand
)


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def build_command(args: CLIArgs) -> Command:
        """Map parsed arguments to the command that handles them."""

        if isinstance(args, IsFileArgs):
            return IsFileCommand(args)
        if isinstance(args, DescribeArgs):
            return DescribeCommand(args)
        if isinstance(args, RemoveDirectoriesArgs):
            return RemoveDirectoriesCommand(args)
        if isinstance(args, FindArgs):
            return FindCommand(args)
        if isinstance(args, ConcatArgs):
            return ConcatCommand(args)
        if isinstance(args, PermissionsArgs):
            return PermissionsCommand(args)
        return PlatformCommand(args)

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Exits with status 1 when the command reports failure or raises, and
        130 when interrupted.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list)
            if not CommandProcessor.build_command(args).execute():
                sys.exit(1)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            sys.exit(130)
        except (OSError, InvalidPermissionStringError, PlatformDetectionError) as e:
            logger.error("%s", e)
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit`` inside ``CommandProcessor.process_command``.
    """
    CommandProcessor.process_command()
    return 0
