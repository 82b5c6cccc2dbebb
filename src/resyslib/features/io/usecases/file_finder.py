"""Summary: Classify file-like path strings and search directories for files.
Why: Validate paths before files exist and locate files without ad-hoc globbing.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path
from typing import final

from resyslib.platform.filesystem import require_directory
from resyslib.platform.logging import logger

from .ports import PathLike


def _has_trailing_extension_dot(text: str) -> bool:
    """Return whether a dot sits 2, 3 or 4 characters from the end."""

    length = len(text)
    if length >= 4 and text[-4] == ".":
        return True
    if length >= 3 and (text[-3] == "." or text[-2] == "."):
        return True
    if length >= 2 and text[-2] == ".":
        return True
    return False


@final
class FileFinder:
    """Classify and locate files on the local filesystem."""

    def is_a_file(self, file_path: PathLike) -> bool:
        """Determine whether ``file_path`` names a file.

        True when the path exists as a regular file, or, for strings longer
        than one character, when a dot appears within the last four
        characters (so paths to files that do not exist yet still count).
        The heuristic is best-effort: ``"v1.2"`` or ``"..x"`` also match.
        Errors during the check yield False.
        """
        try:
            text = os.fspath(file_path)
            if Path(text).is_file():
                return True
            if len(text) > 1 and _has_trailing_extension_dot(text):
                return True
            return Path(text).is_file()
        except (OSError, TypeError, ValueError) as exc:
            logger.debug("Could not inspect %r: %s", file_path, exc)
            return False

    def find_files(self, root: PathLike, pattern: str = "*", *, recursive: bool = True) -> list[Path]:
        """Return regular files below ``root`` whose names match ``pattern``.

        Raises:
            FileNotFoundError: If ``root`` does not exist.
            NotADirectoryError: If ``root`` is not a folder.
        """
        base = require_directory(Path(root))
        entries = base.rglob(pattern) if recursive else base.glob(pattern)
        return sorted(entry for entry in entries if entry.is_file())

    def find_directories(
        self, root: PathLike, pattern: str = "*", *, recursive: bool = True
    ) -> list[Path]:
        """Return folders below ``root`` (excluding it) whose names match ``pattern``."""

        base = require_directory(Path(root))
        entries = base.rglob(pattern) if recursive else base.glob(pattern)
        return sorted(entry for entry in entries if entry.is_dir() and entry != base)

    def locate_file(self, file_name: str, search_roots: Iterable[PathLike]) -> Path | None:
        """Return the first file named ``file_name`` below the given roots.

        Roots are searched in order; missing roots are skipped.
        """
        for root in search_roots:
            base = Path(root)
            if not base.is_dir():
                logger.debug("Skipping missing search root %s", base)
                continue
            matches = sorted(entry for entry in base.rglob(file_name) if entry.is_file())
            if matches:
                return matches[0]
        return None


_default_finder = FileFinder()


def is_a_file(file_path: PathLike) -> bool:
    """Module-level shortcut for ``FileFinder().is_a_file``."""
    return _default_finder.is_a_file(file_path)


__all__ = ["FileFinder", "is_a_file"]
