"""Longest common subsequence between two sequences."""

import logging
from typing import List, Sequence, Tuple

logger = logging.getLogger(__name__)


def _suffix_table(list_a: Sequence, list_b: Sequence) -> List[List[int]]:
    """Build the LCS length table for every pair of suffixes.

    table[a][b] = length of the LCS of list_a[a:] and list_b[b:]
    """
    last_a = len(list_a) - 1
    last_b = len(list_b) - 1
    table = [[0] * len(list_b) for _ in range(len(list_a))]

    for a in range(last_a, -1, -1):
        row = table[a]
        next_row = table[a + 1] if a < last_a else None
        for b in range(last_b, -1, -1):
            if list_a[a] == list_b[b]:
                suffix_len = 0
                if next_row is not None and b < last_b:
                    suffix_len = next_row[b + 1]
                row[b] = 1 + suffix_len
            else:
                len_skipping_a = next_row[b] if next_row is not None else 0
                len_skipping_b = row[b + 1] if b < last_b else 0
                row[b] = max(len_skipping_a, len_skipping_b)

    return table


def lcs(list_a: Sequence, list_b: Sequence) -> List[Tuple[int, int]]:
    """Return the longest common subsequence between the two inputs.

    The sequence is returned as a list of ``(index_a, index_b)`` tuples for
    the common items, strictly increasing in both components.

    When more than one subsequence has the maximal length, ties are broken by
    skipping items from ``list_b`` first.
    """
    if not list_a or not list_b:
        return []

    logger.debug("lcs table %dx%d", len(list_a), len(list_b))
    table = _suffix_table(list_a, list_b)

    last_a = len(list_a) - 1
    last_b = len(list_b) - 1

    longest = []
    a = 0
    b = 0
    while a < len(list_a) and b < len(list_b):
        if list_a[a] == list_b[b]:
            longest.append((a, b))
            a += 1
            b += 1
        elif a < last_a and b < last_b:
            if table[a + 1][b] > table[a][b + 1]:
                a += 1
            else:
                b += 1
        elif a < last_a:
            # at the end of list_b, keep looking for a match in list_a
            a += 1
        else:
            b += 1

    return longest
