"""Helpers to run executables from tests and check their output."""

import logging
import os
import shutil
import subprocess
import sys
from typing import List, Mapping, Optional, Sequence

from .types import BinaryNotFoundError, ProcessError

logger = logging.getLogger(__name__)


def get_bin(name: str) -> str:
    """Return the path of an executable installed with the project.

    Console scripts are installed next to the running interpreter, so that
    directory is searched first, then ``PATH``.
    """
    bin_dir = os.path.dirname(os.path.abspath(sys.executable))
    candidates = [name]
    if sys.platform == "win32":
        candidates.insert(0, name + ".exe")
    for candidate in candidates:
        path = os.path.join(bin_dir, candidate)
        if os.path.isfile(path):
            return path

    found = shutil.which(name)
    if found is None:
        raise BinaryNotFoundError(f"could not find executable for `{name}`")
    return found


def get_process_output(completed: subprocess.CompletedProcess) -> str:
    """Return the standard output of a finished process.

    The output must have been captured as bytes. Raises `ProcessError` if the
    process exited with a non-zero status or wrote anything to stderr.
    """
    stderr = (completed.stderr or b"").decode("utf-8", errors="replace")
    if completed.returncode != 0:
        message = f"executable exited with error ({completed.returncode})"
        if stderr:
            message += f" and error output: {stderr}"
        raise ProcessError(message, completed.returncode, stderr)
    if stderr:
        raise ProcessError(f"executable generated error output: {stderr}", 0, stderr)
    return (completed.stdout or b"").decode("utf-8")


def run_command(argv: Sequence[str], cwd: Optional[str] = None,
                env: Optional[Mapping[str, str]] = None) -> str:
    """Run a command and return its output, see `get_process_output`."""
    logger.debug("running %s (cwd=%s)", list(argv), cwd)
    completed = subprocess.run(list(argv), cwd=cwd, env=env, capture_output=True)
    return get_process_output(completed)


def get_bin_output(name: str, args: Sequence[str] = (),
                   cwd: Optional[str] = None) -> subprocess.CompletedProcess:
    """Run an executable found by `get_bin` and return the finished process.

    Use this to inspect the exit code and error output.
    """
    argv: List[str] = [get_bin(name), *args]
    logger.debug("running %s (cwd=%s)", argv, cwd)
    return subprocess.run(argv, cwd=cwd, capture_output=True)


def run_bin(name: str, args: Sequence[str] = (), cwd: Optional[str] = None) -> str:
    """Combine `get_bin_output` and `get_process_output`."""
    return get_process_output(get_bin_output(name, args, cwd))
