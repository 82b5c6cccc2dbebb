"""src/resyslib/ui/cli/display/result.py
What: Render user-facing results for the CLI subcommands.
Why: Keep console output formatting consistent across commands.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import fields
from pathlib import Path
from typing import final

from rich.console import Console
from rich.table import Table

from resyslib.features.io import FileModel
from resyslib.features.runtime import Platform


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_flag(self, label: str, value: bool, *, quiet: bool = False) -> None:
        if quiet:
            return
        colour = "green" if value else "red"
        self.console.print(f"{label}: [{colour}]{'yes' if value else 'no'}[/{colour}]")

    def show_file_model(self, model: FileModel, *, quiet: bool = False) -> None:
        if quiet:
            return
        table = Table(show_header=False, box=None)
        table.add_column(style="bold cyan")
        table.add_column()
        table.add_row("Name", model.file_name)
        table.add_row("Extension", model.file_extension or "(none)")
        table.add_row("Path", model.file_path)
        self.console.print(table)

    def show_paths(self, title: str, paths: Sequence[Path], *, quiet: bool = False) -> None:
        """Print ``paths`` one per line under a header with their count."""

        if quiet:
            return
        self.console.print(f"[bold]{title}[/bold] ({len(paths)})")
        for path in paths:
            self.console.print(f"  • {path}", highlight=False)

    def show_removal_failures(self, failures: Sequence[tuple[Path, OSError]]) -> None:
        """Failures are always printed, even in quiet mode."""

        self.console.print(f"[bold red]Failed to delete[/bold red] ({len(failures)})")
        for path, error in failures:
            self.console.print(f"  • {path}: {error.strerror or error}", highlight=False)

    def show_error(self, message: str) -> None:
        self.console.print(f"[bold red]Error:[/bold red] {message}", highlight=False)

    def show_text(self, text: str, *, quiet: bool = False) -> None:
        if quiet:
            return
        self.console.print(text, markup=False, highlight=False, end="")

    def show_platform(self, platform: Platform, *, quiet: bool = False) -> None:
        if quiet:
            return
        table = Table(title="Platform", show_header=False)
        table.add_column(style="bold cyan")
        table.add_column()
        for item in fields(platform):
            value = getattr(platform, item.name)
            rendered = getattr(value, "value", value)
            table.add_row(item.name.replace("_", " ").title(), "" if rendered is None else str(rendered))
        self.console.print(table)


__all__ = ["ResultDisplay"]
