"""Platform provider backed by the standard library ``platform`` module."""

from __future__ import annotations

import asyncio
import platform
from typing import Final, final

from resyslib.platform.logging import logger

from ..domain.models import FormFactor, OperatingSystemFamily, Platform

_SYSTEM_FAMILIES: Final[dict[str, OperatingSystemFamily]] = {
    "windows": OperatingSystemFamily.WINDOWS,
    "darwin": OperatingSystemFamily.MACOS,
    "linux": OperatingSystemFamily.LINUX,
    "freebsd": OperatingSystemFamily.FREEBSD,
    "android": OperatingSystemFamily.ANDROID,
    "ios": OperatingSystemFamily.IOS,
    "ipados": OperatingSystemFamily.IOS,
}

_DESKTOP_FAMILIES: Final[frozenset[OperatingSystemFamily]] = frozenset(
    {
        OperatingSystemFamily.WINDOWS,
        OperatingSystemFamily.MACOS,
        OperatingSystemFamily.LINUX,
        OperatingSystemFamily.FREEBSD,
    }
)


@final
class HostPlatformProvider:
    """Detect desktop and server platforms from interpreter metadata."""

    async def get_current_platform(self) -> Platform:
        return await asyncio.to_thread(self.detect)

    def detect(self) -> Platform:
        """Synchronously inspect the host; unknown systems are not an error."""

        system = platform.system()
        family = _SYSTEM_FAMILIES.get(system.lower(), OperatingSystemFamily.UNKNOWN)
        name, version = self._describe(family, system)
        architecture = platform.machine() or "unknown"

        if family in _DESKTOP_FAMILIES:
            form_factor = FormFactor.DESKTOP
        elif family is OperatingSystemFamily.IOS:
            form_factor = self._ios_form_factor()
        else:
            form_factor = FormFactor.UNKNOWN

        return Platform(
            family=family,
            name=name,
            version=version,
            architecture=architecture,
            form_factor=form_factor,
        )

    @staticmethod
    def _describe(family: OperatingSystemFamily, system: str) -> tuple[str, str]:
        """Return a display name and version for ``family``."""

        release = platform.release()

        if family is OperatingSystemFamily.WINDOWS:
            win_release, win_version, _, _ = platform.win32_ver()
            return f"Windows {win_release or release}".strip(), win_version or release

        if family is OperatingSystemFamily.MACOS:
            mac_version, _, _ = platform.mac_ver()
            return "macOS", mac_version or release

        if family is OperatingSystemFamily.LINUX:
            try:
                os_release = platform.freedesktop_os_release()
            except OSError as exc:
                logger.debug("No os-release data available: %s", exc)
                return "Linux", release
            name = os_release.get("PRETTY_NAME") or os_release.get("NAME") or "Linux"
            return name, os_release.get("VERSION_ID") or release

        return system or "unknown", release

    @staticmethod
    def _ios_form_factor() -> FormFactor:
        ios_ver = getattr(platform, "ios_ver", None)
        if ios_ver is None:
            return FormFactor.UNKNOWN
        model = str(ios_ver().model)
        return FormFactor.TABLET if model.lower().startswith("ipad") else FormFactor.PHONE


__all__ = ["HostPlatformProvider"]
