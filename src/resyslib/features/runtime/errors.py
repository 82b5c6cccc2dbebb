"""Exceptions raised by platform providers."""

from __future__ import annotations


class PlatformDetectionError(RuntimeError):
    """Raised when the current platform cannot be determined."""


class PlatformNotSupportedError(PlatformDetectionError):
    """Raised when a provider is asked about a platform it does not run on."""


__all__ = ["PlatformDetectionError", "PlatformNotSupportedError"]
