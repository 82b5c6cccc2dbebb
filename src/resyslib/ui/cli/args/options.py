"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class IsFileArgs:
    """Arguments for the ``is-file`` subcommand."""

    command: Literal["is-file"]
    path: str
    quiet: bool


@final
@dataclass(slots=True)
class DescribeArgs:
    """Arguments for the ``describe`` subcommand."""

    command: Literal["describe"]
    path: str
    quiet: bool


@final
@dataclass(slots=True)
class RemoveDirectoriesArgs:
    """Arguments for the ``rmdir`` subcommand."""

    command: Literal["rmdir"]
    paths: list[Path]
    only_if_empty: bool
    with_parent: bool
    stop_on_error: bool
    quiet: bool


@final
@dataclass(slots=True)
class FindArgs:
    """Arguments for the ``find`` subcommand."""

    command: Literal["find"]
    root: Path
    pattern: str
    directories: bool
    recursive: bool
    quiet: bool


@final
@dataclass(slots=True)
class ConcatArgs:
    """Arguments for the ``concat`` subcommand."""

    command: Literal["concat"]
    sources: list[Path]
    output: Path | None
    separator: str
    quiet: bool


@final
@dataclass(slots=True)
class PermissionsArgs:
    """Arguments for the ``perms`` subcommand."""

    command: Literal["perms"]
    action: Literal["parse", "show", "apply"]
    value: str | None
    path: Path | None
    quiet: bool


@final
@dataclass(slots=True)
class PlatformArgs:
    """Arguments for the ``platform`` subcommand."""

    command: Literal["platform"]
    android: bool
    quiet: bool


CLIArgs = (
    IsFileArgs
    | DescribeArgs
    | RemoveDirectoriesArgs
    | FindArgs
    | ConcatArgs
    | PermissionsArgs
    | PlatformArgs
)

__all__ = [
    "CLIArgs",
    "ConcatArgs",
    "DescribeArgs",
    "FindArgs",
    "IsFileArgs",
    "PermissionsArgs",
    "PlatformArgs",
    "RemoveDirectoriesArgs",
]
