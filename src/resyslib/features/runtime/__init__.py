# Path: `src/resyslib/features/runtime/__init__.py`
# Summary: Export platform models, providers and the detection entry points.
# Why: Provide a stable import surface for callers, the CLI and tests.

from .adapters.android import AndroidPlatformProvider, is_android
from .adapters.host import HostPlatformProvider
from .domain.models import AndroidPlatform, FormFactor, OperatingSystemFamily, Platform
from .errors import PlatformDetectionError, PlatformNotSupportedError
from .usecases.detection import get_current_platform, select_platform_provider
from .usecases.ports import AndroidPlatformProviderPort, PlatformProvider

__all__ = [
    "AndroidPlatform",
    "AndroidPlatformProvider",
    "AndroidPlatformProviderPort",
    "FormFactor",
    "HostPlatformProvider",
    "OperatingSystemFamily",
    "Platform",
    "PlatformDetectionError",
    "PlatformNotSupportedError",
    "PlatformProvider",
    "get_current_platform",
    "is_android",
    "select_platform_provider",
]
