"""
C runtime detection for Linux hosts.

The glibc-linked ccline builds need glibc 2.35 or newer; everything else gets
the statically linked musl build. Detection never fails: any problem running
or reading ``ldd --version`` is treated as musl.
"""

import re
import subprocess
from dataclasses import dataclass
from typing import Optional

from .config import get_ldd_timeout
from .logger import get_logger

logger = get_logger("ccline.libc")

GLIBC = "glibc"
MUSL = "musl"
UNKNOWN = "unknown"

# Oldest glibc the dynamically linked builds run on
MIN_GLIBC = (2, 35)

LDD_COMMAND = ["ldd", "--version"]

_GLIBC_VERSION_RE = re.compile(r"(?:GNU libc|GLIBC).*?(\d+)\.(\d+)")


@dataclass(frozen=True)
class LibcInfo:
    kind: str
    major: Optional[int] = None
    minor: Optional[int] = None

    @classmethod
    def glibc(cls, major: int, minor: int) -> "LibcInfo":
        return cls(GLIBC, major, minor)

    @property
    def is_musl(self) -> bool:
        return self.kind == MUSL

    @property
    def is_glibc(self) -> bool:
        return self.kind == GLIBC

    def __str__(self) -> str:
        if self.is_glibc:
            return f"glibc {self.major}.{self.minor}"
        return self.kind


LIBC_MUSL = LibcInfo(MUSL)
LIBC_UNKNOWN = LibcInfo(UNKNOWN)


def parse_ldd_output(output: str) -> LibcInfo:
    """Classify the text printed by ``ldd --version``."""
    if MUSL in output.lower():
        return LIBC_MUSL
    match = _GLIBC_VERSION_RE.search(output)
    if match:
        return LibcInfo.glibc(int(match.group(1)), int(match.group(2)))
    return LIBC_UNKNOWN


def needs_static_build(info: LibcInfo) -> bool:
    """True when only the musl build can be trusted to run on this libc."""
    if not info.is_glibc:
        return True
    return (info.major, info.minor) < MIN_GLIBC


def _run_ldd(timeout: float) -> str:
    # musl's ldd prints its banner to stderr and exits 1, so keep both
    # streams and ignore the status.
    result = subprocess.run(
        LDD_COMMAND,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        errors="replace",
        timeout=timeout,
    )
    return result.stdout or ""


def detect(timeout: Optional[float] = None) -> LibcInfo:
    """
    Detect the C runtime of this host.

    Args:
        timeout: Seconds to wait for ldd (default: CCLINE_LDD_TIMEOUT or 1s)

    Returns:
        glibc with its version, or musl. Failed or inconclusive probes return musl.
    """
    if timeout is None:
        timeout = get_ldd_timeout()
    try:
        output = _run_ldd(timeout)
    except subprocess.TimeoutExpired:
        logger.debug("ldd --version timed out after %ss, assuming musl", timeout)
        return LIBC_MUSL
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("ldd --version failed (%s), assuming musl", e)
        return LIBC_MUSL

    info = parse_ldd_output(output)
    if info.kind == UNKNOWN:
        logger.debug("Unrecognized ldd output, assuming musl")
        return LIBC_MUSL
    logger.debug("Detected libc: %s", info)
    return info
