"""
Logging for the ccline launcher.

All launcher output goes to stderr: stdout belongs to the statusline binary,
whose output Claude Code reads verbatim.

Module loggers (``ccline.libc``, ``ccline.binary``, ...) are plain children of
the ``ccline`` logger, which owns the only handler.
"""

import logging
import sys
from typing import Optional

DEFAULT_LOGGER_NAME = "ccline"


def _level(verbose: bool) -> int:
    return logging.DEBUG if verbose else logging.WARNING


def _configure_root(verbose: Optional[bool]) -> logging.Logger:
    logger = logging.getLogger(DEFAULT_LOGGER_NAME)

    # Only configure if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        if verbose is None:
            from .config import is_debug_enabled
            verbose = is_debug_enabled()

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.setLevel(_level(verbose))

        # Prevent propagation to root logger
        logger.propagate = False

    return logger


def get_logger(name: Optional[str] = None, verbose: Optional[bool] = None) -> logging.Logger:
    """
    Get a launcher logger.

    Args:
        name: Logger name (default: "ccline"). Names outside the ccline
            namespace are nested under it.
        verbose: Debug output for a first-time setup. None reads CCLINE_DEBUG.

    Returns:
        Logger whose records end up on the ccline stderr handler
    """
    root = _configure_root(verbose)
    if not name or name == DEFAULT_LOGGER_NAME:
        return root
    if not name.startswith(DEFAULT_LOGGER_NAME + "."):
        name = f"{DEFAULT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def set_verbose(verbose: bool) -> None:
    """Switch the launcher logger between DEBUG and WARNING."""
    _configure_root(verbose).setLevel(_level(verbose))
