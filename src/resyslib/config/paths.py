"""Where: src/resyslib/config/paths.py
What: Locate the configuration file and the log directory.
Why: Keep every on-disk location beside the checkout unless the caller overrides it.

Lookup order for the config file: an explicit path, then
``RESYSLIB_CONFIG_FILE``, then ``<repo_root>/config/config.toml``. Logs always
go to ``<repo_root>/logs/resyslib.log``.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Final

CONFIG_FILE_ENV_VAR: Final[str] = "RESYSLIB_CONFIG_FILE"
LOG_FILE_NAME: Final[str] = "resyslib.log"
_ROOT_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Pick the first available of explicit path, environment value and default.

    Blank environment values count as unset. The result is user-expanded and
    absolute.
    """
    if explicit_path is not None:
        chosen = Path(explicit_path)
    else:
        variables = os.environ if env is None else env
        override = variables.get(env_var, "").strip() if env_var else ""
        chosen = Path(override) if override else default_factory()
    return chosen.expanduser().resolve()


def _detect_repo_root(start: Path | None = None) -> Path:
    """Return the nearest ancestor of ``start`` holding a root marker.

    ``start`` defaults to this module. Without any marker the working
    directory is used, which is the case for non-editable installs.
    """
    origin = (start or Path(__file__).resolve()).parent
    for candidate in (origin, *origin.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return Path.cwd()


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Location of ``config.toml`` after applying the environment override."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=CONFIG_FILE_ENV_VAR,
        default_factory=lambda: _detect_repo_root() / "config" / "config.toml",
    )


def default_log_dir() -> Path:
    return (_detect_repo_root() / "logs").resolve()


def default_log_file() -> Path:
    return default_log_dir() / LOG_FILE_NAME


__all__ = [
    "CONFIG_FILE_ENV_VAR",
    "LOG_FILE_NAME",
    "default_config_path",
    "default_log_dir",
    "default_log_file",
    "resolve_overridable_path",
]
