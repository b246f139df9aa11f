"""Utilities for computing the difference between sequences."""

from .lcs import lcs
from .lines import LinesDiff, diff_lines, get_stats, lines, render_diff

__all__ = ["lcs", "diff_lines", "render_diff", "get_stats", "lines", "LinesDiff"]
