"""Where: src/resyslib/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
"""

from __future__ import annotations

import codecs
import logging

from resyslib.config.config import config as app_config

CONCAT_ENCODING_DEFAULT: str = "utf-8"
PLATFORM_PROBE_TIMEOUT_DEFAULT: float = 5.0

# Batch deletion policy ------------------------------------------------------

DELETE_CONTINUE_ON_ERROR: bool = bool(getattr(app_config, "delete_continue_on_error", True))


# Concatenation ---------------------------------------------------------------


def _validated_encoding(name: object) -> str:
    if not isinstance(name, str) or not name.strip():
        return CONCAT_ENCODING_DEFAULT
    try:
        _ = codecs.lookup(name)
    except LookupError:
        return CONCAT_ENCODING_DEFAULT
    return name


CONCAT_ENCODING: str = _validated_encoding(getattr(app_config, "concat_encoding", None))


# Platform detection ----------------------------------------------------------

_probe_timeout = getattr(app_config, "platform_probe_timeout", PLATFORM_PROBE_TIMEOUT_DEFAULT)
PLATFORM_PROBE_TIMEOUT_SECONDS: float = (
    float(_probe_timeout)
    if isinstance(_probe_timeout, (int, float)) and _probe_timeout > 0
    else PLATFORM_PROBE_TIMEOUT_DEFAULT
)


# Logging ---------------------------------------------------------------------

_level_name = str(getattr(app_config, "console_log_level", "INFO")).upper()
CONSOLE_LOG_LEVEL: int = logging.getLevelNamesMapping().get(_level_name, logging.INFO)


__all__ = [
    "CONCAT_ENCODING",
    "CONSOLE_LOG_LEVEL",
    "DELETE_CONTINUE_ON_ERROR",
    "PLATFORM_PROBE_TIMEOUT_SECONDS",
]
