"""Line diff built on top of the LCS alignment."""

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Sequence

from ..types import Delete, Diff, DiffStats, Insert, Output
from .lcs import lcs

logger = logging.getLogger(__name__)


def _common_prefix(source: Sequence, result: Sequence) -> int:
    limit = min(len(source), len(result))
    count = 0
    while count < limit and source[count] == result[count]:
        count += 1
    return count


def _common_suffix(source: Sequence, result: Sequence, skip: int) -> int:
    """Length of the common suffix, ignoring the first `skip` items."""
    limit = min(len(source), len(result)) - skip
    last_source = len(source) - 1
    last_result = len(result) - 1
    count = 0
    while count < limit and source[last_source - count] == result[last_result - count]:
        count += 1
    return count


def diff_lines(source: Sequence, result: Sequence) -> List[Diff]:
    """Compute the edit script transforming `source` into `result`.

    The script is a list of Output, Delete and Insert runs. No run is empty,
    no two Output runs are adjacent, and when a Delete and an Insert happen
    at the same position the Delete comes first.

    Equal inputs produce an empty script.
    """
    prefix = _common_prefix(source, result)
    if prefix == len(source) and prefix == len(result):
        return []

    suffix = _common_suffix(source, result, prefix)
    middle_source = source[prefix:len(source) - suffix]
    middle_result = result[prefix:len(result) - suffix]
    logger.debug("diff: prefix=%d suffix=%d middle=%dx%d",
                 prefix, suffix, len(middle_source), len(middle_result))

    diff: List[Diff] = []
    if prefix > 0:
        diff.append(Output(prefix))

    # trimming guarantees the middle starts and ends with a difference, so
    # the prefix and suffix runs never touch an interior Output
    interior: List[Diff] = []
    cur_source = 0
    cur_result = 0
    for index_source, index_result in lcs(middle_source, middle_result):
        if index_source > cur_source:
            interior.append(Delete(index_source - cur_source))
        if index_result > cur_result:
            interior.append(Insert(index_result - cur_result))

        if interior and isinstance(interior[-1], Output):
            interior[-1].count += 1
        else:
            interior.append(Output(1))

        cur_source = index_source + 1
        cur_result = index_result + 1

    if cur_source < len(middle_source):
        interior.append(Delete(len(middle_source) - cur_source))
    if cur_result < len(middle_result):
        interior.append(Insert(len(middle_result) - cur_result))

    assert interior, "non-equal inputs must differ in the middle"
    assert not isinstance(interior[0], Output)
    assert not isinstance(interior[-1], Output)
    diff.extend(interior)

    if suffix > 0:
        diff.append(Output(suffix))

    return diff


def render_diff(diff: Sequence[Diff], source: Sequence, result: Sequence) -> str:
    """Render an edit script as text.

    Each item covered by the script becomes one line prefixed with ``" "``
    (unchanged), ``"-"`` (deleted) or ``"+"`` (inserted).
    """
    output = []
    offset_source = 0
    offset_result = 0
    for op in diff:
        if isinstance(op, Output):
            items = source[offset_source:offset_source + op.count]
            offset_source += op.count
            offset_result += op.count
        elif isinstance(op, Delete):
            items = source[offset_source:offset_source + op.count]
            offset_source += op.count
        else:
            items = result[offset_result:offset_result + op.count]
            offset_result += op.count
        output.extend(f"{op.prefix}{item}" for item in items)
    return "\n".join(output)


def get_stats(diff: Sequence[Diff]) -> DiffStats:
    """Count the items added, removed and kept by an edit script."""
    stats = DiffStats()
    for op in diff:
        if isinstance(op, Insert):
            stats.additions += op.count
        elif isinstance(op, Delete):
            stats.deletions += op.count
        else:
            stats.unchanged += op.count
    return stats


@dataclass
class LinesDiff:
    """An edit script along with the sequences it was computed from.

    Converting to ``str`` renders the diff.
    """
    source: Sequence
    result: Sequence
    ops: List[Diff] = field(default_factory=list)

    def __iter__(self) -> Iterator[Diff]:
        return iter(self.ops)

    def __len__(self) -> int:
        return len(self.ops)

    def __bool__(self) -> bool:
        return bool(self.ops)

    def __str__(self) -> str:
        return render_diff(self.ops, self.source, self.result)

    @property
    def stats(self) -> DiffStats:
        return get_stats(self.ops)


def lines(source: Sequence, result: Sequence) -> LinesDiff:
    """Diff two sequences of lines, keeping them around for rendering."""
    return LinesDiff(source, result, diff_lines(source, result))
