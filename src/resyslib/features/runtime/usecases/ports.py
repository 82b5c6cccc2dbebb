"""Summary: Ports for asynchronous platform providers.
Why: Decouple callers from the detection mechanism of each platform family.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..domain.models import AndroidPlatform, Platform


@runtime_checkable
class PlatformProvider(Protocol):
    """Port for retrieving the current platform."""

    async def get_current_platform(self) -> Platform:
        """Detect and return the platform the process is running on."""
        ...


@runtime_checkable
class AndroidPlatformProviderPort(PlatformProvider, Protocol):
    """Port adding Android-specific details."""

    async def get_current_android_platform(self) -> AndroidPlatform:
        """Detect and return the Android platform with build properties."""
        ...


__all__ = ["AndroidPlatformProviderPort", "PlatformProvider"]
