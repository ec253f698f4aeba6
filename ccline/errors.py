"""
Launcher failures and exit codes.

Each error is raised before the statusline binary runs (or instead of it
running) and is reported on stderr by ``ccline.cli``.
"""

from pathlib import Path
from typing import Union

# Returned when the launcher itself fails, same convention as `docker run`.
LAUNCHER_EXIT_CODE = 125
# Child finished without a usable exit status.
ABNORMAL_EXIT_CODE = 1

MANUAL_INSTALL_URL = "https://github.com/Haleclipse/CCometixLine"
REINSTALL_HINT = "pip install --force-reinstall ccline"


class LauncherError(RuntimeError):
    """Base class for failures the launcher reports to the user."""


class UnsupportedPlatformError(LauncherError):
    """No binary bundle is published for the resolved platform key."""

    def __init__(self, platform_key: str, supported: str):
        self.platform_key = platform_key
        self.supported = supported
        super().__init__(
            f"Unsupported platform {platform_key}\n"
            f"Supported platforms: {supported}\n"
            f"Please visit {MANUAL_INSTALL_URL} for manual installation"
        )


class BinaryNotFoundError(LauncherError):
    """The bundle for this platform is mapped but its binary is missing on disk."""

    def __init__(self, path: Union[str, Path], package: str):
        self.path = Path(path)
        self.package = package
        super().__init__(
            f"Binary not found at {self.path}\n"
            "This might indicate a failed installation or unsupported platform.\n"
            f"Please try reinstalling: {REINSTALL_HINT}\n"
            f"Expected package: {package}",
        )


class SpawnError(LauncherError):
    """The operating system refused to start the binary."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to execute {self.path}: {reason}")
