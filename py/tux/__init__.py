"""Test utilities: line diffs, file-driven tests, temp dirs, processes and HTTP."""

from . import diff, text
from .diff import LinesDiff, diff_lines, get_stats, lcs, render_diff
from .text import join_lines, split_lines, trim, trim_lines
from .data import TestData, TestInput, TestResult, TestRun, testdata, testdata_to_result
from .process import get_bin, get_bin_output, get_process_output, run_bin, run_command
from .temp import TempDir, temp_dir
from .server import TestServer
from .types import (
    Diff, Output, Delete, Insert, DiffStats,
    TuxError, TestDataError, ProcessError, TempDirError, BinaryNotFoundError,
)

__all__ = [
    # Modules
    "diff", "text",
    # Diff functions
    "lcs", "diff_lines", "render_diff", "get_stats", "LinesDiff",
    # Text functions
    "split_lines", "trim_lines", "trim", "join_lines",
    # Testdata
    "testdata", "testdata_to_result", "TestData", "TestInput", "TestResult", "TestRun",
    # Processes and temp dirs
    "get_bin", "get_bin_output", "get_process_output", "run_bin", "run_command",
    "TempDir", "temp_dir",
    # HTTP
    "TestServer",
    # Types
    "Diff", "Output", "Delete", "Insert", "DiffStats",
    # Errors
    "TuxError", "TestDataError", "ProcessError", "TempDirError", "BinaryNotFoundError",
]
