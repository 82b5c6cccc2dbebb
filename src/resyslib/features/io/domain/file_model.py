"""Summary: Decompose a file path into name, extension and absolute path.
Why: Callers need a stable description of a file captured at one point in time.
"""

from __future__ import annotations

import os


class FileModel:
    """Describe a file by name, extension and canonical full path.

    Values are computed once at construction and the path is not required to
    exist. Subclasses may assign the protected attributes; everyone else reads
    the properties.
    """

    __slots__ = ("_file_name", "_file_extension", "_file_path")

    def __init__(self, file_path: str | os.PathLike[str]) -> None:
        raw_path = os.fspath(file_path)
        stem, extension = os.path.splitext(os.path.basename(raw_path))
        if extension == ".":
            extension = ""

        self._file_name: str = stem
        self._file_extension: str = extension
        self._file_path: str = os.path.abspath(raw_path)

    @property
    def file_name(self) -> str:
        """Base name without the final extension."""
        return self._file_name

    @property
    def file_extension(self) -> str:
        """Final extension including the leading dot, or an empty string."""
        return self._file_extension

    @property
    def file_path(self) -> str:
        """Absolute, normalized path."""
        return self._file_path

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileModel):
            return NotImplemented
        return (self._file_name, self._file_extension, self._file_path) == (
            other._file_name,
            other._file_extension,
            other._file_path,
        )

    def __hash__(self) -> int:
        return hash((self._file_name, self._file_extension, self._file_path))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(file_name={self._file_name!r}, "
            f"file_extension={self._file_extension!r}, file_path={self._file_path!r})"
        )


__all__ = ["FileModel"]
