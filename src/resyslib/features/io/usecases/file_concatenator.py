"""Concatenate text files into a string or a destination file."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from resyslib.config.settings import CONCAT_ENCODING
from resyslib.platform.filesystem import ensure_parent_directory
from resyslib.platform.logging import logger

from .ports import PathLike


def _resolve_sources(sources: Iterable[PathLike]) -> list[Path]:
    resolved = [Path(source) for source in sources]
    missing = [path for path in resolved if not path.is_file()]
    if missing:
        raise FileNotFoundError(
            "Cannot concatenate missing files: " + ", ".join(str(path) for path in missing)
        )
    return resolved


def concatenate_files(
    sources: Iterable[PathLike],
    *,
    separator: str = "",
    encoding: str | None = None,
) -> str:
    """Return the contents of ``sources`` joined by ``separator``.

    Raises:
        FileNotFoundError: If any source is not an existing file.
    """
    paths = _resolve_sources(sources)
    text_encoding = encoding or CONCAT_ENCODING
    return separator.join(path.read_text(encoding=text_encoding) for path in paths)


def concatenate_files_to(
    sources: Iterable[PathLike],
    destination: PathLike,
    *,
    separator: str = "",
    encoding: str | None = None,
    overwrite: bool = True,
) -> Path:
    """Write the concatenation of ``sources`` to ``destination``.

    Every source is checked before anything is written, and parent folders of
    ``destination`` are created as needed.

    Raises:
        FileNotFoundError: If any source is not an existing file.
        FileExistsError: If ``destination`` exists and ``overwrite`` is False.
    """
    paths = _resolve_sources(sources)
    target = Path(destination)
    if target.exists() and not overwrite:
        raise FileExistsError(f"Destination already exists: {target}")

    text_encoding = encoding or CONCAT_ENCODING
    content = separator.join(path.read_text(encoding=text_encoding) for path in paths)

    _ = ensure_parent_directory(target)
    _ = target.write_text(content, encoding=text_encoding)
    logger.info(
        "Concatenated %d files into %s",
        len(paths),
        target,
        extra={"event": "files.concatenated", "path": str(target), "source_count": len(paths)},
    )
    return target


__all__ = ["concatenate_files", "concatenate_files_to"]
