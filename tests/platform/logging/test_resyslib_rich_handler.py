"""Tests for the ``ResyslibRichHandler`` event rendering."""

from __future__ import annotations

import logging
import logging.handlers
from io import StringIO
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.text import Text

from resyslib.platform.logging import LOGGER_NAME, ResyslibRichHandler, setup_logger


def _make_handler() -> ResyslibRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return ResyslibRichHandler(console=console)


def _build_record(message: str = "", **extras: Any) -> logging.LogRecord:
    record = logging.LogRecord(
        name=LOGGER_NAME,
        level=logging.INFO,
        pathname="test",
        lineno=0,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_deleted_directory_truncates_long_paths() -> None:
    handler = _make_handler()
    record = _build_record(event="directory.deleted", path="/home/user/projects/build/cache/objects/pack")

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)

    plain = rendered.plain
    assert "Deleted directory" in plain
    assert "/…/build/cache/objects/pack" in plain
    assert "/home/user" not in plain


def test_short_paths_are_kept_whole() -> None:
    handler = _make_handler()
    record = _build_record(event="directory.deleted", path="/tmp/work")

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)
    assert rendered.plain.endswith("/tmp/work")
    assert "…" not in rendered.plain


def test_windows_paths_keep_backslashes() -> None:
    handler = _make_handler()
    record = _build_record(
        event="directory.delete.failed",
        path="D:\\archive\\one\\two\\three\\four\\five",
        error_message="Directory is not empty",
    )

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)

    plain = rendered.plain
    assert "two\\three\\four\\five" in plain
    assert "archive" not in plain
    assert "(Directory is not empty)" in plain


def test_concatenation_reports_source_count() -> None:
    handler = _make_handler()
    record = _build_record(event="files.concatenated", path="out/joined.txt", source_count=3)

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)
    assert "out/joined.txt (3 sources)" in rendered.plain


def test_platform_event_lists_details() -> None:
    handler = _make_handler()
    record = _build_record(
        event="platform.detected",
        platform_name="Android",
        platform_version="14",
        architecture="arm64-v8a",
        form_factor="phone",
    )

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)
    assert "Detected platform Android [14, arm64-v8a, phone]" in rendered.plain


def test_plain_records_use_default_rendering() -> None:
    handler = _make_handler()
    record = _build_record("plain message")

    rendered = handler.render_message(record, "plain message")
    assert isinstance(rendered, Text)
    assert rendered.plain == "plain message"


def test_setup_logger_attaches_rotating_file(tmp_path: Path) -> None:
    log_file = tmp_path / "nested" / "resyslib.log"
    logger = setup_logger(log_file=log_file, console_level=logging.WARNING)
    try:
        logger.debug("written to file only")
        for handler in logger.handlers:
            handler.flush()

        handler_types = {type(handler) for handler in logger.handlers}
        assert ResyslibRichHandler in handler_types
        assert logging.handlers.RotatingFileHandler in handler_types
        assert "written to file only" in log_file.read_text(encoding="utf-8")
    finally:
        _ = setup_logger()
