"""Summary: Delete directories with emptiness policy and deletion notifications.
Why: Centralise removal rules so callers pick a failure channel, not a mechanism.
"""

from __future__ import annotations

import errno
import shutil
from collections.abc import Iterable
from pathlib import Path

from resyslib.config.settings import DELETE_CONTINUE_ON_ERROR
from resyslib.platform.filesystem import is_directory_empty, require_directory
from resyslib.platform.logging import logger

from .events import DirectoryDeletedEvent
from .ports import PathLike


class DirectoryNotEmptyError(OSError):
    """Raised when an empty-only deletion meets a directory with entries."""

    def __init__(self, directory: Path) -> None:
        super().__init__(errno.ENOTEMPTY, "Directory is not empty", str(directory))


class DirectoriesRemovalError(OSError):
    """Raised after a best-effort batch deletion in which some entries failed."""

    def __init__(self, failures: list[tuple[Path, OSError]]) -> None:
        self.failures = failures
        summary = ", ".join(f"{path} ({error})" for path, error in failures)
        super().__init__(f"Failed to delete {len(failures)} directories: {summary}")


class DirectoryRemover:
    """Delete directories on the local filesystem.

    With ``delete_empty_directory`` a directory is only removed when it has
    no entries; otherwise it is removed with everything inside it. Each
    removed directory is announced through ``directory_deleted``.
    """

    def __init__(self) -> None:
        self.directory_deleted = DirectoryDeletedEvent()

    def try_delete_directory(
        self,
        directory: PathLike,
        delete_empty_directory: bool,
        delete_parent_directory: bool,
    ) -> bool:
        """Delete ``directory`` and report the outcome as a flag.

        Only removal failures become False. A failing ``directory_deleted``
        subscriber still raises, since the directory is already gone.

        Returns:
            bool: True when every requested removal succeeded, False otherwise.

        Raises:
            DirectoryDeletedHandlerError: If a subscriber raised.
        """
        try:
            self.delete_directory(directory, delete_empty_directory, delete_parent_directory)
        except OSError as exc:
            self._log_failure(Path(directory), exc)
            return False
        return True

    def delete_directory(
        self,
        directory: PathLike,
        delete_empty_directory: bool,
        delete_parent_directory: bool,
    ) -> None:
        """Delete ``directory`` and, optionally, its parent.

        The parent is handled under the same emptiness policy. When the parent
        removal fails the child stays removed and the error propagates.

        Raises:
            FileNotFoundError: If ``directory`` does not exist.
            NotADirectoryError: If ``directory`` is not a folder.
            DirectoryNotEmptyError: If an empty-only removal meets entries.
            OSError: For any other filesystem failure.
        """
        target = Path(directory)
        self._remove(target, delete_empty_directory)
        if delete_parent_directory:
            self.delete_parent_directory(target, delete_empty_directory)

    def delete_parent_directory(self, directory: PathLike, delete_empty_directory: bool) -> None:
        """Delete the parent folder of ``directory``."""

        self._remove(self._parent_of(Path(directory)), delete_empty_directory)

    def delete_directories(
        self,
        directories: Iterable[PathLike],
        delete_empty_directory: bool,
        delete_parent_directory: bool,
        *,
        continue_on_error: bool | None = None,
    ) -> list[Path]:
        """Delete each directory in ``directories``.

        Directories are removed first; requested parents follow once each, so
        siblings listed together do not block their shared parent. Parents
        that no longer exist at that point are skipped.

        Args:
            directories: Folders to delete.
            delete_empty_directory: Only delete folders that have no entries.
            delete_parent_directory: Also delete the parent of every removed folder.
            continue_on_error: Attempt every entry and raise the collected
                failures at the end (default from settings), or stop at the
                first failure and re-raise it. Nothing is rolled back.

        Returns:
            list[Path]: Every removed directory, in removal order.

        Raises:
            DirectoriesRemovalError: In best-effort mode when any entry failed.
        """
        keep_going = DELETE_CONTINUE_ON_ERROR if continue_on_error is None else continue_on_error
        removed: list[Path] = []
        failures: list[tuple[Path, OSError]] = []

        def attempt(target: Path) -> bool:
            try:
                self._remove(target, delete_empty_directory)
            except OSError as exc:
                self._log_failure(target, exc)
                if not keep_going:
                    raise
                failures.append((target, exc))
                return False
            removed.append(target)
            return True

        parents: list[Path] = []
        for directory in directories:
            target = Path(directory)
            if attempt(target) and delete_parent_directory:
                try:
                    parent = self._parent_of(target)
                except OSError as exc:
                    if not keep_going:
                        raise
                    failures.append((target, exc))
                    continue
                if parent not in parents:
                    parents.append(parent)

        for parent in parents:
            if not parent.exists():
                logger.debug("Parent directory already gone: %s", parent)
                continue
            _ = attempt(parent)

        if failures:
            raise DirectoriesRemovalError(failures)
        return removed

    def _remove(self, target: Path, delete_empty_directory: bool) -> None:
        _ = require_directory(target)
        if delete_empty_directory:
            if not is_directory_empty(target):
                raise DirectoryNotEmptyError(target)
            target.rmdir()
        else:
            shutil.rmtree(target)

        logger.info(
            "Deleted directory %s",
            target,
            extra={"event": "directory.deleted", "path": str(target)},
        )
        self.directory_deleted.emit(target)

    @staticmethod
    def _parent_of(directory: Path) -> Path:
        parent = directory.absolute().parent
        if parent == parent.parent:
            raise PermissionError(errno.EPERM, "Refusing to delete the filesystem root", str(parent))
        return parent

    @staticmethod
    def _log_failure(target: Path, exc: OSError) -> None:
        logger.warning(
            "Failed to delete directory %s: %s",
            target,
            exc,
            extra={
                "event": "directory.delete.failed",
                "path": str(target),
                "error_message": exc.strerror or str(exc),
            },
        )


__all__ = ["DirectoriesRemovalError", "DirectoryNotEmptyError", "DirectoryRemover"]
