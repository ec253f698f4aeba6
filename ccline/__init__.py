"""
ccline - launcher for the CCometixLine statusline binary.

Picks the native build for this OS, CPU and C runtime and runs it with the
caller's arguments and standard streams.
"""

from .binary import find_binary, locate
from .dispatch import dispatch
from .errors import (
    LAUNCHER_EXIT_CODE,
    BinaryNotFoundError,
    LauncherError,
    SpawnError,
    UnsupportedPlatformError,
)
from .libc import LibcInfo
from .libc import detect as detect_libc
from .platforms import PACKAGE_MAP, current_platform_key, resolve_platform_key

__version__ = "1.0.0"
__all__ = [
    # Resolution
    "LibcInfo",
    "detect_libc",
    "resolve_platform_key",
    "current_platform_key",
    "PACKAGE_MAP",
    # Binary
    "locate",
    "find_binary",
    "dispatch",
    # Errors
    "LauncherError",
    "UnsupportedPlatformError",
    "BinaryNotFoundError",
    "SpawnError",
    "LAUNCHER_EXIT_CODE",
]
