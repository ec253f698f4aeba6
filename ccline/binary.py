"""
Binary resolution: user-installed override first, then the bundled build.

The override is ``$CLAUDE_CONFIG_DIR/ccline/ccline`` and then
``~/.claude/ccline/ccline`` (the path the ccline TUI installs itself to); the
first one present always wins. Otherwise the binary comes from the bundle
package matching this host's platform key.

Bundles are separate distributions (``ccline-linux-x64``,
``ccline-darwin-arm64``, ...) that each ship one native binary inside an
import directory of the same name (``ccline_linux_x64/ccline``). They are
installed into the same site-packages as this launcher, e.g.
``pip install ccline ccline-linux-x64``, so the launcher finds them next to
its own package directory.
"""

from pathlib import Path
from typing import List, Optional

from .config import get_ccline_dir, get_ccline_dirs
from .errors import BinaryNotFoundError
from .logger import get_logger
from .platforms import WINDOWS, current_os, current_platform_key, package_for_platform

logger = get_logger("ccline.binary")

TOOL_NAME = "ccline"

# site-packages/ccline
LAUNCHER_DIR = Path(__file__).resolve().parent


def binary_name(os_name: Optional[str] = None) -> str:
    """ccline.exe on Windows, ccline elsewhere."""
    os_name = os_name or current_os()
    return f"{TOOL_NAME}.exe" if os_name == WINDOWS else TOOL_NAME


def get_override_path(os_name: Optional[str] = None, ccline_dir: Optional[Path] = None) -> Path:
    """Path to ccline under CLAUDE_CONFIG_DIR (or ~/.claude when unset)."""
    base = Path(ccline_dir) if ccline_dir is not None else get_ccline_dir()
    return base / binary_name(os_name)


def get_override_paths(os_name: Optional[str] = None, ccline_dir: Optional[Path] = None) -> List[Path]:
    """Candidate user-installed binaries, in lookup order."""
    if ccline_dir is not None:
        return [get_override_path(os_name, ccline_dir)]
    name = binary_name(os_name)
    return [d / name for d in get_ccline_dirs()]


def find_override_binary(os_name: Optional[str] = None, ccline_dir: Optional[Path] = None) -> Optional[Path]:
    """User-installed binary, or None."""
    for path in get_override_paths(os_name, ccline_dir):
        if path.is_file():
            logger.debug("Using user-installed binary: %s", path)
            return path
    return None


def get_bundle_root() -> Path:
    """Directory the bundle packages are installed into, beside the launcher."""
    return LAUNCHER_DIR.parent


def bundle_dirname(package: str) -> str:
    """Import directory of a bundle distribution (ccline-linux-x64 -> ccline_linux_x64)."""
    return package.replace("-", "_").replace(".", "_")


def get_bundle_path(
    platform_key: str,
    os_name: Optional[str] = None,
    bundle_root: Optional[Path] = None,
) -> Path:
    """Expected location of the bundled binary for a platform key."""
    package = package_for_platform(platform_key)
    root = Path(bundle_root) if bundle_root is not None else get_bundle_root()
    return root / bundle_dirname(package) / binary_name(os_name)


def find_bundled_binary(
    platform_key: str,
    os_name: Optional[str] = None,
    bundle_root: Optional[Path] = None,
) -> Path:
    """
    Bundled binary for a platform key.

    Raises:
        UnsupportedPlatformError: no bundle is published for the key
        BinaryNotFoundError: the bundle is not installed or incomplete
    """
    path = get_bundle_path(platform_key, os_name, bundle_root)
    if not path.is_file():
        raise BinaryNotFoundError(path, package_for_platform(platform_key))
    logger.debug("Using bundled binary: %s", path)
    return path


def locate(
    platform_key: str,
    os_name: Optional[str] = None,
    ccline_dir: Optional[Path] = None,
    bundle_root: Optional[Path] = None,
) -> Path:
    """Resolve the binary for a known platform key: override, then bundle."""
    override = find_override_binary(os_name, ccline_dir)
    if override is not None:
        return override
    return find_bundled_binary(platform_key, os_name, bundle_root)


def find_binary(
    ccline_dir: Optional[Path] = None,
    bundle_root: Optional[Path] = None,
) -> Path:
    """
    Find the ccline binary for this host.

    The platform key (and with it the libc probe) is only computed when no
    user-installed binary exists. Nothing is cached between calls.
    """
    os_name = current_os()
    override = find_override_binary(os_name, ccline_dir)
    if override is not None:
        return override
    return find_bundled_binary(current_platform_key(), os_name, bundle_root)
