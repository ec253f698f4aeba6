"""
Run the resolved binary in place of the launcher.

The child inherits stdin, stdout and stderr directly; the launcher only waits
for it and hands back its exit status.
"""

import subprocess
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .errors import ABNORMAL_EXIT_CODE, SpawnError
from .logger import get_logger

logger = get_logger("ccline.dispatch")


def normalize_exit_code(returncode: Optional[int]) -> int:
    """
    Turn a child's return status into a process exit code.

    None becomes ABNORMAL_EXIT_CODE; a POSIX death by signal N (reported by
    subprocess as -N) becomes 128 + N, as a shell would report it.
    """
    if returncode is None:
        return ABNORMAL_EXIT_CODE
    if returncode < 0:
        return 128 - returncode
    return returncode


def _wait(proc: "subprocess.Popen[bytes]") -> Optional[int]:
    while True:
        try:
            return proc.wait()
        except KeyboardInterrupt:
            # The terminal sent SIGINT to the child too; let it decide how to exit.
            logger.debug("Interrupted, waiting for ccline to exit")


def dispatch(path: Union[str, Path], args: Sequence[str]) -> int:
    """
    Execute the binary with args and wait for it.

    Returns:
        The child's exit code, normalized with normalize_exit_code()

    Raises:
        SpawnError: the process could not be started at all
    """
    cmd: List[str] = [str(path)] + [str(a) for a in args]
    logger.debug("Executing: %s", " ".join(cmd))
    try:
        proc = subprocess.Popen(cmd, shell=False)
    except OSError as e:
        raise SpawnError(path, e.strerror or str(e)) from e

    returncode = normalize_exit_code(_wait(proc))
    logger.debug("ccline exited with %d", returncode)
    return returncode
