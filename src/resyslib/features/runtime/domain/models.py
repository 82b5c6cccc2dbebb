"""Data structures that describe the platform the process runs on."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OperatingSystemFamily(str, Enum):
    """Operating system families the providers can report."""

    WINDOWS = "windows"
    MACOS = "macos"
    LINUX = "linux"
    FREEBSD = "freebsd"
    ANDROID = "android"
    IOS = "ios"
    UNKNOWN = "unknown"


class FormFactor(str, Enum):
    """Device shapes a platform can run on."""

    DESKTOP = "desktop"
    PHONE = "phone"
    TABLET = "tablet"
    TELEVISION = "television"
    WEARABLE = "wearable"
    AUTOMOTIVE = "automotive"
    UNKNOWN = "unknown"


@dataclass(slots=True, frozen=True)
class Platform:
    """Identify an operating system and the device form factor."""

    family: OperatingSystemFamily
    name: str
    version: str
    architecture: str
    form_factor: FormFactor = FormFactor.UNKNOWN


@dataclass(slots=True, frozen=True)
class AndroidPlatform(Platform):
    """Android platform enriched with build properties."""

    api_level: int | None = None
    manufacturer: str = ""
    model: str = ""
    build_id: str = ""


__all__ = ["AndroidPlatform", "FormFactor", "OperatingSystemFamily", "Platform"]
