"""Choose the provider for the running platform and report its findings."""

from __future__ import annotations

from collections.abc import Mapping

from resyslib.platform.logging import logger

from ..adapters.android import AndroidPlatformProvider, is_android
from ..adapters.host import HostPlatformProvider
from ..domain.models import Platform
from .ports import PlatformProvider


def select_platform_provider(env: Mapping[str, str] | None = None) -> PlatformProvider:
    """Return the Android provider on Android and the host provider elsewhere."""

    if is_android(env):
        return AndroidPlatformProvider(env=env)
    return HostPlatformProvider()


async def get_current_platform(provider: PlatformProvider | None = None) -> Platform:
    """Detect the current platform with ``provider`` or the selected default."""

    active = provider or select_platform_provider()
    detected = await active.get_current_platform()
    logger.debug(
        "Detected platform %s %s",
        detected.name,
        detected.version,
        extra={
            "event": "platform.detected",
            "platform_name": detected.name,
            "platform_version": detected.version,
            "architecture": detected.architecture,
            "form_factor": detected.form_factor.value,
        },
    )
    return detected


__all__ = ["get_current_platform", "select_platform_provider"]
