"""Type definitions for the tux library."""

from dataclasses import dataclass
from typing import ClassVar


@dataclass
class Diff:
    """A run of `count` items sharing the same edit operation."""
    count: int

    prefix: ClassVar[str] = ""


@dataclass
class Output(Diff):
    """Items present in both sequences; advances both cursors."""
    prefix: ClassVar[str] = " "


@dataclass
class Delete(Diff):
    """Items present only in the source; advances the source cursor."""
    prefix: ClassVar[str] = "-"


@dataclass
class Insert(Diff):
    """Items present only in the result; advances the result cursor."""
    prefix: ClassVar[str] = "+"


@dataclass
class DiffStats:
    """Statistics for an edit script."""
    additions: int = 0
    deletions: int = 0
    unchanged: int = 0

    def to_dict(self) -> dict:
        return {
            "additions": self.additions,
            "deletions": self.deletions,
            "unchanged": self.unchanged,
        }


class TuxError(Exception):
    """Base error for the tux library."""
    pass


class TestDataError(TuxError, AssertionError):
    """One or more testdata cases failed."""
    __test__ = False


class ProcessError(TuxError):
    """A child process failed or wrote to its error output."""

    def __init__(self, message: str, returncode: int = 0, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class TempDirError(TuxError, ValueError):
    """Invalid operation on a temporary directory."""
    pass


class BinaryNotFoundError(TuxError, FileNotFoundError):
    """Executable could not be located."""
    pass
