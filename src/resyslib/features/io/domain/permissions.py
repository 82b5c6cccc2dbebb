"""Summary: Parse and format Unix permission strings.
Why: Let callers express modes the way ``ls -l`` and ``chmod`` print them.
"""

from __future__ import annotations

import os
import re
import stat
from pathlib import Path
from typing import ClassVar, Final

_FILE_TYPE_CHARS: Final[frozenset[str]] = frozenset("-dlcbps")
_OCTAL_PATTERN: Final[re.Pattern[str]] = re.compile(r"^(?:0o|0)?([0-7]{3,4})$", re.IGNORECASE)


class InvalidPermissionStringError(ValueError):
    """Raised when a permission string cannot be parsed."""

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid permission string {value!r}: {reason}")


class _Triad:
    """Bit layout for one ``rwx`` group."""

    READ: ClassVar[dict[str, int]] = {"user": stat.S_IRUSR, "group": stat.S_IRGRP, "other": stat.S_IROTH}
    WRITE: ClassVar[dict[str, int]] = {"user": stat.S_IWUSR, "group": stat.S_IWGRP, "other": stat.S_IWOTH}
    EXECUTE: ClassVar[dict[str, int]] = {"user": stat.S_IXUSR, "group": stat.S_IXGRP, "other": stat.S_IXOTH}
    SPECIAL: ClassVar[dict[str, int]] = {"user": stat.S_ISUID, "group": stat.S_ISGID, "other": stat.S_ISVTX}
    # Lowercase means the execute bit is also set.
    SPECIAL_CHARS: ClassVar[dict[str, str]] = {"user": "s", "group": "s", "other": "t"}


_CLASSES: Final[tuple[str, ...]] = ("user", "group", "other")


def parse_permission_string(value: str) -> int:
    """Convert a symbolic or octal permission string into a mode integer.

    Accepted forms: ``rwxr-xr-x``, ``-rw-r--r--`` / ``drwx------`` (a leading
    file-type character is ignored), special bits ``s``/``S``/``t``/``T``, and
    octal ``755``, ``0755`` or ``0o4755``.

    Raises:
        InvalidPermissionStringError: If ``value`` matches none of the forms.
    """
    text = value.strip()

    octal_match = _OCTAL_PATTERN.match(text)
    if octal_match:
        return int(octal_match.group(1), 8)

    if len(text) == 10:
        if text[0] not in _FILE_TYPE_CHARS:
            raise InvalidPermissionStringError(value, f"unknown file type character {text[0]!r}")
        text = text[1:]
    if len(text) != 9:
        raise InvalidPermissionStringError(value, "expected 9 symbolic characters or an octal mode")

    mode = 0
    for index, who in enumerate(_CLASSES):
        read, write, execute = text[index * 3 : index * 3 + 3]
        if read == "r":
            mode |= _Triad.READ[who]
        elif read != "-":
            raise InvalidPermissionStringError(value, f"unexpected {read!r} in {who} read position")
        if write == "w":
            mode |= _Triad.WRITE[who]
        elif write != "-":
            raise InvalidPermissionStringError(value, f"unexpected {write!r} in {who} write position")

        special = _Triad.SPECIAL_CHARS[who]
        if execute == "x":
            mode |= _Triad.EXECUTE[who]
        elif execute == special:
            mode |= _Triad.EXECUTE[who] | _Triad.SPECIAL[who]
        elif execute == special.upper():
            mode |= _Triad.SPECIAL[who]
        elif execute != "-":
            raise InvalidPermissionStringError(value, f"unexpected {execute!r} in {who} execute position")

    return mode


def format_permissions(mode: int) -> str:
    """Render the permission bits of ``mode`` as a 9-character symbolic string."""

    characters: list[str] = []
    for who in _CLASSES:
        characters.append("r" if mode & _Triad.READ[who] else "-")
        characters.append("w" if mode & _Triad.WRITE[who] else "-")

        executable = bool(mode & _Triad.EXECUTE[who])
        special_char = _Triad.SPECIAL_CHARS[who]
        if mode & _Triad.SPECIAL[who]:
            characters.append(special_char if executable else special_char.upper())
        else:
            characters.append("x" if executable else "-")
    return "".join(characters)


def read_permission_string(path: str | os.PathLike[str]) -> str:
    """Return the symbolic permission string of an existing path."""

    return format_permissions(stat.S_IMODE(Path(path).stat().st_mode))


def apply_permission_string(path: str | os.PathLike[str], value: str) -> int:
    """Apply ``value`` to ``path`` with ``chmod`` and return the applied mode."""

    mode = parse_permission_string(value)
    os.chmod(path, mode)
    return mode


__all__ = [
    "InvalidPermissionStringError",
    "apply_permission_string",
    "format_permissions",
    "parse_permission_string",
    "read_permission_string",
]
