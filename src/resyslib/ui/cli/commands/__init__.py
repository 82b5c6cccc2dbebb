"""Command execution package for CLI."""

from resyslib.ui.cli.commands.io import (
    ConcatCommand,
    DescribeCommand,
    FindCommand,
    IsFileCommand,
    PermissionsCommand,
    RemoveDirectoriesCommand,
)
from resyslib.ui.cli.commands.runtime import PlatformCommand

__all__ = [
    "ConcatCommand",
    "DescribeCommand",
    "FindCommand",
    "IsFileCommand",
    "PermissionsCommand",
    "PlatformCommand",
    "RemoveDirectoriesCommand",
]
