"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Build the console and rotating file handlers for the ``resyslib`` logger.
Why: Separate handler formatting from setup so configuration stays concise.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final

from rich.console import Console

from resyslib.config.paths import default_log_file
from resyslib.platform.filesystem import ensure_parent_directory

from .handlers import ResyslibRichHandler


DEFAULT_LOG_FILE: Final[Path] = default_log_file()
LOGGER_NAME: Final[str] = "resyslib"

_FILE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_MAX_LOG_BYTES: Final[int] = 10 * 1024 * 1024
_LOG_BACKUPS: Final[int] = 5


def _console_handler(level: int) -> logging.Handler:
    # Log lines go to stderr; stdout belongs to command output.
    handler = ResyslibRichHandler(console=Console(stderr=True, soft_wrap=True))
    handler.setLevel(level)
    return handler


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    target = Path(log_file).expanduser().resolve()
    _ = ensure_parent_directory(target)
    handler = logging.handlers.RotatingFileHandler(
        target,
        maxBytes=_MAX_LOG_BYTES,
        backupCount=_LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """(Re)configure the ``resyslib`` logger.

    Existing handlers are closed and replaced, so repeated calls never
    duplicate output.

    Args:
        log_file: Rotating log file; ``None`` keeps logging console-only.
        console_level: Threshold for the Rich console handler.
        file_level: Threshold for the file handler.

    Returns:
        logging.Logger: The shared library logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_console_handler(console_level))
    if log_file is not None:
        logger.addHandler(_file_handler(log_file, file_level))
    return logger


# Console-only until an entry point attaches the configured log file.
logger: Final[logging.Logger] = setup_logger()


__all__ = ["DEFAULT_LOG_FILE", "LOGGER_NAME", "setup_logger", "logger"]
