"""File and directory command implementations for the CLI."""

from __future__ import annotations

from pathlib import Path
from typing import final

from resyslib.features.io import (
    DirectoriesRemovalError,
    DirectoryRemover,
    FileFinder,
    FileModel,
    apply_permission_string,
    concatenate_files,
    concatenate_files_to,
    format_permissions,
    parse_permission_string,
    read_permission_string,
)
from resyslib.platform.logging import logger
from resyslib.ui.cli.args.options import (
    ConcatArgs,
    DescribeArgs,
    FindArgs,
    IsFileArgs,
    PermissionsArgs,
    RemoveDirectoriesArgs,
)
from resyslib.ui.cli.display import ResultDisplay


@final
class IsFileCommand:
    """Report whether a path is, or looks like, a file."""

    def __init__(self, args: IsFileArgs, display: ResultDisplay | None = None) -> None:
        self.args = args
        self.finder = FileFinder()
        self.display = display or ResultDisplay()

    def execute(self) -> bool:
        result = self.finder.is_a_file(self.args.path)
        self.display.show_flag(self.args.path, result, quiet=self.args.quiet)
        return result


@final
class DescribeCommand:
    """Show the decomposed description of a file path."""

    def __init__(self, args: DescribeArgs, display: ResultDisplay | None = None) -> None:
        self.args = args
        self.display = display or ResultDisplay()

    def execute(self) -> bool:
        self.display.show_file_model(FileModel(self.args.path), quiet=self.args.quiet)
        return True


@final
class RemoveDirectoriesCommand:
    """Delete the requested directories."""

    def __init__(self, args: RemoveDirectoriesArgs, display: ResultDisplay | None = None) -> None:
        self.args = args
        self.remover = DirectoryRemover()
        self.display = display or ResultDisplay()

    def execute(self) -> bool:
        """Execute the deletion; False when any directory could not be removed."""

        removed: list[Path] = []
        _ = self.remover.directory_deleted.subscribe(removed.append)
        try:
            _ = self.remover.delete_directories(
                self.args.paths,
                self.args.only_if_empty,
                self.args.with_parent,
                continue_on_error=not self.args.stop_on_error,
            )
        except DirectoriesRemovalError as exc:
            self.display.show_paths("Deleted", removed, quiet=self.args.quiet)
            self.display.show_removal_failures(exc.failures)
            return False
        except OSError as exc:
            self.display.show_paths("Deleted", removed, quiet=self.args.quiet)
            self.display.show_error(str(exc))
            return False

        self.display.show_paths("Deleted", removed, quiet=self.args.quiet)
        return True


@final
class FindCommand:
    """List files or directories below a root."""

    def __init__(self, args: FindArgs, display: ResultDisplay | None = None) -> None:
        self.args = args
        self.finder = FileFinder()
        self.display = display or ResultDisplay()

    def execute(self) -> bool:
        if self.args.directories:
            matches = self.finder.find_directories(
                self.args.root, self.args.pattern, recursive=self.args.recursive
            )
            title = "Directories"
        else:
            matches = self.finder.find_files(
                self.args.root, self.args.pattern, recursive=self.args.recursive
            )
            title = "Files"
        self.display.show_paths(title, matches, quiet=self.args.quiet)
        return True


@final
class ConcatCommand:
    """Concatenate text files to the console or a destination file."""

    def __init__(self, args: ConcatArgs, display: ResultDisplay | None = None) -> None:
        self.args = args
        self.display = display or ResultDisplay()

    def execute(self) -> bool:
        if self.args.output is None:
            content = concatenate_files(self.args.sources, separator=self.args.separator)
            self.display.show_text(content, quiet=self.args.quiet)
            return True

        destination = concatenate_files_to(
            self.args.sources, self.args.output, separator=self.args.separator
        )
        self.display.show_paths("Written", [destination], quiet=self.args.quiet)
        return True


@final
class PermissionsCommand:
    """Parse, show or apply permission strings."""

    def __init__(self, args: PermissionsArgs, display: ResultDisplay | None = None) -> None:
        self.args = args
        self.display = display or ResultDisplay()

    def execute(self) -> bool:
        if self.args.action == "parse":
            assert self.args.value is not None
            mode = parse_permission_string(self.args.value)
            self.display.show_text(f"{mode:#o} {format_permissions(mode)}\n", quiet=self.args.quiet)
            return True

        assert self.args.path is not None
        if self.args.action == "show":
            self.display.show_text(
                f"{read_permission_string(self.args.path)} {self.args.path}\n",
                quiet=self.args.quiet,
            )
            return True

        assert self.args.value is not None
        mode = apply_permission_string(self.args.path, self.args.value)
        logger.info("Applied %s to %s", format_permissions(mode), self.args.path)
        return True


__all__ = [
    "ConcatCommand",
    "DescribeCommand",
    "FindCommand",
    "IsFileCommand",
    "PermissionsCommand",
    "RemoveDirectoriesCommand",
]
