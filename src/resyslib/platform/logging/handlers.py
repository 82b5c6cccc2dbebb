"""Summary: Rich console handler that renders structured library events.
Why: Keep filesystem and platform log lines compact and visually scannable.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class ResyslibRichHandler(RichHandler):
    """Rich handler that styles ``event`` extras and shortens paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "directory.deleted": ("🗑️", "green"),
        "directory.delete.failed": ("⛔", "red"),
        "files.concatenated": ("📎", "cyan"),
        "platform.detected": ("🖥️", "blue"),
    }
    _EVENT_LABELS: ClassVar[dict[str, str]] = {
        "directory.deleted": "Deleted directory ",
        "directory.delete.failed": "Could not delete directory ",
        "files.concatenated": "Concatenated files into ",
        "platform.detected": "Detected platform ",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    _SEPARATOR_STYLE: ClassVar[Style] = Style(color="magenta")
    _SEGMENT_STYLE: ClassVar[Style] = Style(color="white")

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Create the handler without time, level or source columns."""

        kwargs.update(
            show_time=False,
            show_path=False,
            show_level=False,
            rich_tracebacks=True,
            markup=False,
            omit_repeated_times=False,
        )
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Keep the anchor and the last few segments, eliding the middle with ``…``."""

        pure_path: PurePath = PureWindowsPath(path) if "\\" in path else PurePosixPath(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"

        anchor = pure_path.anchor
        segments = [part for part in pure_path.parts if part and part != anchor]
        if len(segments) > self._PATH_SEGMENT_LIMIT:
            segments = ["…", *segments[-self._PATH_SEGMENT_LIMIT:]]

        # "/" and "C:\" both end with a separator; "D:" gets one appended.
        head = anchor.rstrip("\\/")
        prefix = [head, separator] if head else ([separator] if anchor else [])

        text = Text()
        for piece in prefix:
            _ = text.append(piece, style=self._SEGMENT_STYLE if piece == head else self._SEPARATOR_STYLE)
        for index, segment in enumerate(segments):
            if index:
                _ = text.append(separator, style=self._SEPARATOR_STYLE)
            style = self._SEPARATOR_STYLE if segment == "…" else self._SEGMENT_STYLE
            _ = text.append(segment, style=style)

        if not text.plain:
            _ = text.append(".", style=self._SEGMENT_STYLE)
        return text

    def _render_event_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured events emitted through ``extra={"event": ...}``."""

        event = getattr(record, "event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(self._EVENT_LABELS.get(event, f"{event} "))

        if event == "platform.detected":
            platform_name = getattr(record, "platform_name", None)
            _ = body.append(str(platform_name or "unknown"))
            details = [
                str(value)
                for value in (
                    getattr(record, "platform_version", None),
                    getattr(record, "architecture", None),
                    getattr(record, "form_factor", None),
                )
                if value
            ]
            if details:
                _ = body.append(" [" + ", ".join(details) + "]")
        else:
            path = getattr(record, "path", None)
            if path:
                _ = body.append_text(self._format_path(str(path)))
            sources = getattr(record, "source_count", None)
            if isinstance(sources, int):
                _ = body.append(f" ({sources} sources)")
            error_message = getattr(record, "error_message", None)
            if error_message:
                _ = body.append(f" ({error_message})")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for structured events."""

        event_text = self._render_event_message(record)
        if event_text is not None:
            return event_text

        return super().render_message(record, message)


__all__ = ["ResyslibRichHandler"]
