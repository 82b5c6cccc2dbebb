# Path: `src/resyslib/features/io/__init__.py`
# Summary: Export file and directory helpers.
# Why: Provide a stable import surface for callers, the CLI and tests.

from .domain.file_model import FileModel
from .domain.permissions import (
    InvalidPermissionStringError,
    apply_permission_string,
    format_permissions,
    parse_permission_string,
    read_permission_string,
)
from .usecases.directory_remover import (
    DirectoriesRemovalError,
    DirectoryNotEmptyError,
    DirectoryRemover,
)
from .usecases.events import (
    DirectoryDeletedEvent,
    DirectoryDeletedHandler,
    DirectoryDeletedHandlerError,
)
from .usecases.file_concatenator import concatenate_files, concatenate_files_to
from .usecases.file_finder import FileFinder, is_a_file
from .usecases.ports import DirectoryRemoverPort, FileFinderPort

__all__ = [
    "DirectoriesRemovalError",
    "DirectoryDeletedEvent",
    "DirectoryDeletedHandler",
    "DirectoryDeletedHandlerError",
    "DirectoryNotEmptyError",
    "DirectoryRemover",
    "DirectoryRemoverPort",
    "FileFinder",
    "FileFinderPort",
    "FileModel",
    "InvalidPermissionStringError",
    "apply_permission_string",
    "concatenate_files",
    "concatenate_files_to",
    "format_permissions",
    "is_a_file",
    "parse_permission_string",
    "read_permission_string",
]
