"""Synchronous observer list for directory deletion notifications."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

DirectoryDeletedHandler = Callable[[Path], None]


class DirectoryDeletedHandlerError(RuntimeError):
    """Raised when a subscriber fails; the directory is already gone."""

    def __init__(self, directory: Path, handler: DirectoryDeletedHandler) -> None:
        self.directory = directory
        self.handler = handler
        super().__init__(f"Deletion handler {handler!r} failed for {directory}")


class DirectoryDeletedEvent:
    """Hold subscribers and notify them once per removed directory.

    Handlers run in subscription order before ``emit`` returns. A handler
    that raises stops the notification; its error reaches the caller that
    triggered the deletion wrapped in ``DirectoryDeletedHandlerError``.
    """

    def __init__(self) -> None:
        self._handlers: list[DirectoryDeletedHandler] = []

    @property
    def handlers(self) -> tuple[DirectoryDeletedHandler, ...]:
        return tuple(self._handlers)

    def subscribe(self, handler: DirectoryDeletedHandler) -> DirectoryDeletedHandler:
        """Register ``handler`` and return it so it can be used as a decorator."""

        self._handlers.append(handler)
        return handler

    def unsubscribe(self, handler: DirectoryDeletedHandler) -> bool:
        """Remove the most recent registration of ``handler``; False when unknown."""

        for index in range(len(self._handlers) - 1, -1, -1):
            if self._handlers[index] == handler:
                del self._handlers[index]
                return True
        return False

    def emit(self, directory: Path) -> None:
        for handler in list(self._handlers):
            try:
                handler(directory)
            except Exception as exc:
                raise DirectoryDeletedHandlerError(directory, handler) from exc

    def __len__(self) -> int:
        return len(self._handlers)


__all__ = ["DirectoryDeletedEvent", "DirectoryDeletedHandler", "DirectoryDeletedHandlerError"]
