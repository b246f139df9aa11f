"""Temporary directories for tests."""

import logging
import os
import subprocess
import tempfile
from pathlib import Path
from typing import Sequence, Union

from . import process
from .types import TempDirError

logger = logging.getLogger(__name__)


class TempDir:
    """A temporary directory that is deleted along with its contents.

    Use it as a context manager or call `close` when done::

        with TempDir() as dir:
            dir.create_file("test.txt", "some content")
    """

    def __init__(self):
        self._dir = tempfile.TemporaryDirectory(prefix="tux-")
        self._path = Path(self._dir.name).resolve()
        logger.debug("created temp dir %s", self._path)

    def __enter__(self) -> "TempDir":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Delete the directory and everything in it."""
        self._dir.cleanup()

    @property
    def path(self) -> Path:
        """Absolute path to the directory."""
        return self._path

    @property
    def path_str(self) -> str:
        return str(self._path)

    def create_file(self, name: str, contents: Union[str, bytes]) -> Path:
        """Create a file in the directory and return its absolute path.

        `name` may contain intermediate directories, which are created as
        needed. Raises `TempDirError` if the file would end up outside the
        temporary directory.
        """
        root = str(self._path)
        path = os.path.normpath(os.path.join(root, name))
        if os.path.commonpath([root, path]) != root or path == root:
            raise TempDirError(f"cannot create test file outside temp dir: {name}")

        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(contents, bytes):
            path.write_bytes(contents)
        else:
            path.write_text(contents, encoding="utf-8")
        return path

    def run_bin(self, name: str, args: Sequence[str] = ()) -> str:
        """`tux.process.run_bin` with this directory as working directory."""
        return process.get_process_output(self.get_bin_output(name, args))

    def get_bin_output(self, name: str, args: Sequence[str] = ()) -> subprocess.CompletedProcess:
        return process.get_bin_output(name, args, cwd=self.path_str)


def temp_dir() -> TempDir:
    """Create a new `TempDir`."""
    return TempDir()
