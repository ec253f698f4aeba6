"""
CLI: exec the ccline binary for this platform with all args.

pip install ccline → ccline --help / ccline --config / statusline mode, all
handled by the native binary. No Python-side argument parsing.
"""

import sys
from typing import List, Optional, Sequence

from .config import is_debug_enabled, load_env_file
from .errors import LAUNCHER_EXIT_CODE, LauncherError
from .logger import get_logger, set_verbose

logger = get_logger("ccline.cli")


def report_error(error: Exception) -> None:
    """Print a launcher failure on stderr, one line per message line."""
    lines = str(error).splitlines() or [error.__class__.__name__]
    print(f"Error: {lines[0]}", file=sys.stderr)
    for line in lines[1:]:
        print(line, file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point: resolve the binary and run it with all args."""
    from .binary import find_binary
    from .dispatch import dispatch

    args: List[str] = list(sys.argv[1:] if argv is None else argv)

    if load_env_file():
        set_verbose(is_debug_enabled())

    try:
        binary = find_binary()
        return dispatch(binary, args)
    except LauncherError as e:
        logger.debug("Launcher failed: %r", e)
        report_error(e)
        return LAUNCHER_EXIT_CODE


if __name__ == "__main__":
    sys.exit(main())
