"""Platform detection command for the CLI."""

from __future__ import annotations

import asyncio
from typing import final

from resyslib.features.runtime import (
    AndroidPlatformProvider,
    Platform,
    get_current_platform,
)
from resyslib.ui.cli.args.options import PlatformArgs
from resyslib.ui.cli.display import ResultDisplay


@final
class PlatformCommand:
    """Detect the current platform and print it."""

    def __init__(self, args: PlatformArgs, display: ResultDisplay | None = None) -> None:
        self.args = args
        self.display = display or ResultDisplay()

    def execute(self) -> bool:
        detected = asyncio.run(self._detect())
        self.display.show_platform(detected, quiet=self.args.quiet)
        return True

    async def _detect(self) -> Platform:
        if self.args.android:
            return await AndroidPlatformProvider().get_current_android_platform()
        return await get_current_platform()


__all__ = ["PlatformCommand"]
