"""
Configuration: environment parsing and the optional launcher .env file.
"""

from .env_config import (
    DEFAULT_LDD_TIMEOUT,
    get_ccline_dir,
    get_ccline_dirs,
    get_claude_config_dir,
    get_env_file,
    get_float_env,
    get_ldd_timeout,
    is_debug_enabled,
    load_env_file,
    parse_bool_env,
)

__all__ = [
    "DEFAULT_LDD_TIMEOUT",
    "get_ccline_dir",
    "get_ccline_dirs",
    "get_claude_config_dir",
    "get_env_file",
    "get_float_env",
    "get_ldd_timeout",
    "is_debug_enabled",
    "load_env_file",
    "parse_bool_env",
]
