"""
Environment variable parsing for the ccline launcher.

Single source of truth for reading CCLINE_* and CLAUDE_CONFIG_DIR.
Used by libc (probe timeout), binary (override path), logger and cli.
"""

import os
from pathlib import Path
from typing import List, Optional, Union

DEFAULT_LDD_TIMEOUT = 1.0  # seconds
ENV_FILE_NAME = ".env"


def parse_bool_env(
    key: str,
    default: bool,
    legacy_key: Optional[str] = None,
) -> bool:
    """
    Parse a boolean from environment variable.

    Accepts: true, false, 1, 0, yes, no, on, off (case-insensitive).
    Unknown values fall back to default.

    Args:
        key: Primary environment variable name (e.g. CCLINE_DEBUG)
        default: Default value if not set or invalid
        legacy_key: Optional legacy key to check if primary is not set

    Returns:
        Parsed boolean value
    """
    value = os.environ.get(key)
    if value is None and legacy_key:
        value = os.environ.get(legacy_key)
    if value is None:
        return default

    value_lower = value.lower().strip()
    if value_lower in ("true", "1", "yes", "on"):
        return True
    if value_lower in ("false", "0", "no", "off", ""):
        return False
    return default


def get_float_env(key: str, default: float) -> float:
    """
    Parse a positive float from environment variable.

    Missing, malformed, zero or negative values fall back to default.
    """
    value = os.environ.get(key)
    if value:
        try:
            parsed = float(value)
        except ValueError:
            return default
        if parsed > 0:
            return parsed
    return default


def is_debug_enabled() -> bool:
    """Debug logging on stderr. CCLINE_DEBUG."""
    return parse_bool_env("CCLINE_DEBUG", False)


def get_ldd_timeout() -> float:
    """Upper bound in seconds for the libc probe. CCLINE_LDD_TIMEOUT."""
    return get_float_env("CCLINE_LDD_TIMEOUT", DEFAULT_LDD_TIMEOUT)


def get_claude_config_dir() -> Path:
    """Claude Code config directory. CLAUDE_CONFIG_DIR, else ~/.claude."""
    configured = os.environ.get("CLAUDE_CONFIG_DIR")
    if configured:
        return Path(configured).expanduser()
    return Path.home() / ".claude"


def get_ccline_dir() -> Path:
    """Directory holding the user-installed ccline binary and launcher settings."""
    return get_claude_config_dir() / "ccline"


def get_ccline_dirs() -> List[Path]:
    """
    Directories searched for a user-installed binary, in order.

    CLAUDE_CONFIG_DIR/ccline first, then ~/.claude/ccline, where the ccline
    TUI installs itself regardless of CLAUDE_CONFIG_DIR.
    """
    dirs = [get_ccline_dir()]
    home_dir = Path.home() / ".claude" / "ccline"
    if home_dir not in dirs:
        dirs.append(home_dir)
    return dirs


def get_env_file() -> Path:
    """Path to the launcher .env file (<claude-config-dir>/ccline/.env)."""
    return get_ccline_dir() / ENV_FILE_NAME


def load_env_file(env_file: Optional[Union[str, Path]] = None) -> bool:
    """
    Load the launcher .env file into the environment.

    Values already present in the environment are kept. Returns True when a
    file was found and read.
    """
    from dotenv import load_dotenv

    path = Path(env_file) if env_file is not None else get_env_file()
    if not path.is_file():
        return False
    load_dotenv(path, override=False)
    return True
