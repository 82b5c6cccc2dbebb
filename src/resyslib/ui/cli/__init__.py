"""Command line interface package."""

from resyslib.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
