"""Collector modules for hostfetch."""

import sys

from .base import BaseCollector, CollectorResult
from .gpu import GpuCollector
from .identity import IdentityCollector, SerialCollector
from .resources import ResourceCollector

SUPPORTED_PLATFORMS = ("linux", "darwin", "win32", "freebsd")


def platform_supported(platform_name: str | None = None) -> bool:
    """Return True if the host-query layer knows how to read this platform."""
    name = platform_name if platform_name is not None else sys.platform
    return name.startswith(SUPPORTED_PLATFORMS)


__all__ = [
    "BaseCollector",
    "CollectorResult",
    "GpuCollector",
    "IdentityCollector",
    "ResourceCollector",
    "SerialCollector",
    "SUPPORTED_PLATFORMS",
    "platform_supported",
]
