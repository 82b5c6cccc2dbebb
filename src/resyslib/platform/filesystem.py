"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

import os
from pathlib import Path


def ensure_directory(directory: Path) -> Path:
    """Ensure ``directory`` exists as a folder and return it."""

    if directory.exists():
        if not directory.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
        return directory

    directory.mkdir(parents=True, exist_ok=True)
    return directory


def ensure_parent_directory(path: Path) -> Path:
    """Ensure the parent directory for ``path`` exists and return it."""

    parent = path.parent
    return ensure_directory(parent)


def require_directory(directory: Path) -> Path:
    """Return ``directory`` when it exists as a folder, raising otherwise."""

    if not directory.exists():
        raise FileNotFoundError(f"Directory does not exist: {directory}")
    if not directory.is_dir():
        raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
    return directory


def is_directory_empty(directory: Path) -> bool:
    """Return whether ``directory`` holds no entries at all."""

    with os.scandir(directory) as entries:
        return next(entries, None) is None


__all__ = [
    "ensure_directory",
    "ensure_parent_directory",
    "is_directory_empty",
    "require_directory",
]
