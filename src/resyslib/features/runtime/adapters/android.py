"""Summary: Android platform provider reading system build properties.
Why: Report Android release, API level and device shape without native bindings.
"""

from __future__ import annotations

import asyncio
import os
import platform
import re
import shutil
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Final, final

from resyslib.config.settings import PLATFORM_PROBE_TIMEOUT_SECONDS
from resyslib.platform.logging import logger

from ..domain.models import AndroidPlatform, FormFactor, OperatingSystemFamily
from ..errors import PlatformDetectionError, PlatformNotSupportedError

BUILD_PROP_PATH: Final[Path] = Path("/system/build.prop")

_GETPROP_LINE: Final[re.Pattern[str]] = re.compile(r"^\[(?P<key>[^\]]+)\]: \[(?P<value>.*)\]$")

# Checked in order; the first characteristic that matches wins.
_CHARACTERISTIC_FORM_FACTORS: Final[tuple[tuple[str, FormFactor], ...]] = (
    ("automotive", FormFactor.AUTOMOTIVE),
    ("watch", FormFactor.WEARABLE),
    ("tv", FormFactor.TELEVISION),
    ("tablet", FormFactor.TABLET),
)


def is_android(env: Mapping[str, str] | None = None) -> bool:
    """Return whether the interpreter runs on Android."""

    if sys.platform == "android":
        return True
    mapping = env if env is not None else os.environ
    return bool(mapping.get("ANDROID_ROOT")) and bool(mapping.get("ANDROID_DATA"))


def parse_getprop_output(output: str) -> dict[str, str]:
    """Parse ``[key]: [value]`` lines printed by ``getprop``."""

    properties: dict[str, str] = {}
    for line in output.splitlines():
        match = _GETPROP_LINE.match(line.strip())
        if match:
            properties[match.group("key")] = match.group("value")
    return properties


def parse_build_prop(content: str) -> dict[str, str]:
    """Parse ``key=value`` lines of a ``build.prop`` file, skipping comments."""

    properties: dict[str, str] = {}
    for raw_line in content.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, _, value = line.partition("=")
        properties[key.strip()] = value.strip()
    return properties


def form_factor_from_characteristics(characteristics: str) -> FormFactor:
    """Map ``ro.build.characteristics`` to a form factor; phones report ``default``."""

    tokens = {token.strip().lower() for token in characteristics.split(",") if token.strip()}
    for token, form_factor in _CHARACTERISTIC_FORM_FACTORS:
        if token in tokens:
            return form_factor
    return FormFactor.PHONE


@final
class AndroidPlatformProvider:
    """Detect Android through ``getprop`` with a ``build.prop`` fallback."""

    def __init__(
        self,
        *,
        timeout: float | None = None,
        build_prop_path: Path = BUILD_PROP_PATH,
        env: Mapping[str, str] | None = None,
    ) -> None:
        self._timeout = timeout if timeout is not None else PLATFORM_PROBE_TIMEOUT_SECONDS
        self._build_prop_path = build_prop_path
        self._env = env

    async def get_current_platform(self) -> AndroidPlatform:
        return await self.get_current_android_platform()

    async def get_current_android_platform(self) -> AndroidPlatform:
        """Return the Android platform with build properties.

        Raises:
            PlatformNotSupportedError: If the process is not running on Android.
            PlatformDetectionError: If no build properties could be read.
        """
        if not is_android(self._env):
            raise PlatformNotSupportedError("Not running on Android")

        properties = await self._run_getprop()
        if not properties:
            properties = await asyncio.to_thread(self._read_build_prop)
        if not properties:
            raise PlatformDetectionError("Android build properties are unavailable")

        return self._build_platform(properties)

    async def _run_getprop(self) -> dict[str, str]:
        executable = shutil.which("getprop")
        if executable is None:
            return {}

        try:
            process = await asyncio.create_subprocess_exec(
                executable,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.DEVNULL,
            )
        except OSError as exc:
            logger.debug("Unable to start getprop: %s", exc)
            return {}

        try:
            stdout, _ = await asyncio.wait_for(process.communicate(), timeout=self._timeout)
        except TimeoutError:
            process.kill()
            _ = await process.wait()
            logger.warning("getprop did not finish within %.1f seconds", self._timeout)
            return {}

        if process.returncode != 0:
            logger.debug("getprop exited with status %s", process.returncode)
            return {}
        return parse_getprop_output(stdout.decode("utf-8", errors="replace"))

    def _read_build_prop(self) -> dict[str, str]:
        try:
            content = self._build_prop_path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            logger.debug("Unable to read %s: %s", self._build_prop_path, exc)
            return {}
        return parse_build_prop(content)

    @staticmethod
    def _build_platform(properties: Mapping[str, str]) -> AndroidPlatform:
        sdk = properties.get("ro.build.version.sdk", "").strip()
        api_level = int(sdk) if sdk.isdigit() else None

        return AndroidPlatform(
            family=OperatingSystemFamily.ANDROID,
            name="Android",
            version=properties.get("ro.build.version.release", ""),
            architecture=properties.get("ro.product.cpu.abi") or platform.machine() or "unknown",
            form_factor=form_factor_from_characteristics(
                properties.get("ro.build.characteristics", "")
            ),
            api_level=api_level,
            manufacturer=properties.get("ro.product.manufacturer", ""),
            model=properties.get("ro.product.model", ""),
            build_id=properties.get("ro.build.id", ""),
        )


__all__ = [
    "AndroidPlatformProvider",
    "BUILD_PROP_PATH",
    "form_factor_from_characteristics",
    "is_android",
    "parse_build_prop",
    "parse_getprop_output",
]
