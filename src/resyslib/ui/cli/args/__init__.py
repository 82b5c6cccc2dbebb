"""Command line argument handling package."""

from resyslib.ui.cli.args.parser import ArgumentParser
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

__all__ = [
    "ArgumentParser",
    "CLIArgs",
    "ConcatArgs",
    "DescribeArgs",
    "FindArgs",
    "IsFileArgs",
    "PermissionsArgs",
    "PlatformArgs",
    "RemoveDirectoriesArgs",
]
