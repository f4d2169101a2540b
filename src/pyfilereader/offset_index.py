"""
Mapping between flat offsets and line numbers.

The flattened text of a document is its lines joined without separators. The
offset table stores, for each line, the cumulative length up to and including
that line, which lets a flat offset be mapped back to a line by binary search.

An offset equal to a line's cumulative length belongs to that line, not the
next: a match ending exactly at the end of line k reports end line k.
"""

from __future__ import annotations

import bisect

from .error_handling import OffsetOutOfRangeError
from .types import Document, OffsetTable


def build_offset_table(document: Document) -> OffsetTable:
    cumulative: list[int] = []
    total = 0
    for line in document.lines:
        total += len(line)
        cumulative.append(total)
    return OffsetTable(tuple(cumulative))


def line_base(table: OffsetTable, line_index: int) -> int:
    """Flat offset of the first character of ``line_index``."""
    if line_index == 0:
        return 0
    return table.cumulative[line_index - 1]


def line_number_for_offset(table: OffsetTable, offset: int) -> int:
    """Return the smallest line index whose cumulative length is >= ``offset``."""
    if offset < 0 or not table.cumulative or offset > table.cumulative[-1]:
        raise OffsetOutOfRangeError(offset, table.total_length)
    return bisect.bisect_left(table.cumulative, offset)
