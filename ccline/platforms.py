"""
Platform key resolution and the platform -> binary bundle map.

Keys look like ``linux-x64``, ``linux-arm64-musl``, ``darwin-arm64`` or
``win32-x64``: the operating system and CPU names used by the published
ccline bundles, plus ``-musl`` for Linux hosts that cannot run the
glibc-linked build.
"""

import platform
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from . import libc
from .errors import UnsupportedPlatformError
from .logger import get_logger

logger = get_logger("ccline.platforms")

LINUX = "linux"
DARWIN = "darwin"
WINDOWS = "win32"

MUSL_SUFFIX = "-musl"

OS_ALIASES: Mapping[str, str] = MappingProxyType({
    "linux": LINUX,
    "darwin": DARWIN,
    "windows": WINDOWS,
    "win32": WINDOWS,
})

ARCH_ALIASES: Mapping[str, str] = MappingProxyType({
    "x86_64": "x64",
    "amd64": "x64",
    "x64": "x64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "ia32",
    "i486": "ia32",
    "i586": "ia32",
    "i686": "ia32",
    "x86": "ia32",
    "ia32": "ia32",
})

# Architectures with no native build that run another platform's binary
KEY_ALIASES: Mapping[str, str] = MappingProxyType({
    "win32-ia32": "win32-x64",
})

PACKAGE_MAP: Mapping[str, str] = MappingProxyType({
    "darwin-x64": "ccline-darwin-x64",
    "darwin-arm64": "ccline-darwin-arm64",
    "linux-x64": "ccline-linux-x64",
    "linux-x64-musl": "ccline-linux-x64-musl",
    "linux-arm64": "ccline-linux-arm64",
    "linux-arm64-musl": "ccline-linux-arm64-musl",
    "win32-x64": "ccline-win32-x64",
})


def normalize_os(system: str) -> str:
    """Map ``platform.system()`` style names onto bundle OS names."""
    name = system.strip().lower()
    return OS_ALIASES.get(name, name)


def normalize_arch(machine: str) -> str:
    """Map ``platform.machine()`` style names onto bundle CPU names."""
    name = machine.strip().lower()
    return ARCH_ALIASES.get(name, name)


def current_os() -> str:
    return normalize_os(platform.system())


def current_arch() -> str:
    return normalize_arch(platform.machine())


def resolve_platform_key(
    os_name: str,
    arch: str,
    libc_info: Optional[libc.LibcInfo] = None,
) -> str:
    """
    Compute the platform key for an OS/CPU pair.

    Args:
        os_name: Operating system, raw or normalized (e.g. "Linux", "linux")
        arch: CPU architecture, raw or normalized (e.g. "aarch64", "arm64")
        libc_info: C runtime of a Linux host. Probed with libc.detect() when
            omitted; ignored on every other OS.

    Returns:
        Platform key, e.g. "linux-arm64-musl"
    """
    os_name = normalize_os(os_name)
    arch = normalize_arch(arch)
    key = f"{os_name}-{arch}"

    if os_name == LINUX:
        if libc_info is None:
            libc_info = libc.detect()
        if libc.needs_static_build(libc_info):
            key += MUSL_SUFFIX

    return KEY_ALIASES.get(key, key)


def current_platform_key() -> str:
    """Platform key of the running host."""
    key = resolve_platform_key(platform.system(), platform.machine())
    logger.debug("Resolved platform key: %s", key)
    return key


def package_for_platform(platform_key: str) -> str:
    """Bundle distribution name for a platform key."""
    try:
        return PACKAGE_MAP[platform_key]
    except KeyError:
        raise UnsupportedPlatformError(platform_key, supported_platforms_summary()) from None


def supported_platforms_summary() -> str:
    """Supported OS/CPU families, e.g. "darwin (x64/arm64), linux (x64/arm64), win32 (x64)"."""
    families: Dict[str, List[str]] = {}
    for key in PACKAGE_MAP:
        os_name, arch = key.split("-")[:2]
        arches = families.setdefault(os_name, [])
        if arch not in arches:
            arches.append(arch)
    return ", ".join(f"{os_name} ({'/'.join(arches)})" for os_name, arches in families.items())
