"""Summary: Ports describing the file and directory helpers.
Why: Let callers depend on behaviour rather than on the local implementations.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol, runtime_checkable

from .events import DirectoryDeletedEvent

PathLike = str | os.PathLike[str]


@runtime_checkable
class FileFinderPort(Protocol):
    """Port for classifying and locating files."""

    def is_a_file(self, file_path: PathLike) -> bool:
        """Return True when ``file_path`` is, or looks like, a file."""
        ...

    def find_files(self, root: PathLike, pattern: str = "*", *, recursive: bool = True) -> list[Path]:
        """Return sorted files below ``root`` matching ``pattern``."""
        ...

    def locate_file(self, file_name: str, search_roots: Iterable[PathLike]) -> Path | None:
        """Return the first file named ``file_name`` under ``search_roots``."""
        ...


@runtime_checkable
class DirectoryRemoverPort(Protocol):
    """Port for deleting directories with notifications."""

    directory_deleted: DirectoryDeletedEvent

    def try_delete_directory(
        self,
        directory: PathLike,
        delete_empty_directory: bool,
        delete_parent_directory: bool,
    ) -> bool:
        """Delete ``directory`` and report failure as False."""
        ...

    def delete_directory(
        self,
        directory: PathLike,
        delete_empty_directory: bool,
        delete_parent_directory: bool,
    ) -> None:
        """Delete ``directory`` and raise on failure."""
        ...

    def delete_parent_directory(self, directory: PathLike, delete_empty_directory: bool) -> None:
        """Delete the parent of ``directory``."""
        ...

    def delete_directories(
        self,
        directories: Iterable[PathLike],
        delete_empty_directory: bool,
        delete_parent_directory: bool,
        *,
        continue_on_error: bool | None = None,
    ) -> list[Path]:
        """Delete every directory in ``directories``."""
        ...


__all__ = ["DirectoryRemoverPort", "FileFinderPort", "PathLike"]
