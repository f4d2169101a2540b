"""
Utility functions for pyfilereader.

Key Functions:
    split_lines: Split text on \\n, \\r\\n or \\r without keeping separators
    line_spans: Project a located group onto per-line (start, end) spans
    highlight_spans: Text highlighting with custom markers
"""

from __future__ import annotations

import regex as regex_mod

from .types import Document, MatchGroup

_LINE_BREAK = regex_mod.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    """
    Split ``text`` into lines.

    A trailing separator ends the last line instead of starting an empty one,
    so ``"a\\nb\\n"`` gives ``["a", "b"]`` and ``""`` gives ``[]``.
    """
    if not text:
        return []
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def line_spans(document: Document, group: MatchGroup) -> list[tuple[int, tuple[int, int]]]:
    """
    Per-line spans covered by a located group.

    Returns:
        List of (line_index, (start_col, end_col)); empty when the group did
        not match or carries no line information.
    """
    if not group.matched or group.start_line < 0:
        return []
    if group.start_line == group.end_line:
        return [(group.start_line, (group.start_index, group.end_index))]
    spans = [(group.start_line, (group.start_index, len(document.lines[group.start_line])))]
    for li in range(group.start_line + 1, group.end_line):
        spans.append((li, (0, len(document.lines[li]))))
    spans.append((group.end_line, (0, group.end_index)))
    return spans


def highlight_spans(
    line: str, spans: list[tuple[int, int]], marker_left: str = "[", marker_right: str = "]"
) -> str:
    """Lightweight span highlighting for plain text output."""
    if not spans:
        return line
    # Ensure non-overlapping and sorted
    spans = sorted(spans, key=lambda x: x[0])
    out: list[str] = []
    last = 0
    for a, b in spans:
        a = max(0, min(len(line), a))
        b = max(0, min(len(line), b))
        if a < last:
            a = last
        if b < a:
            continue
        out.append(line[last:a])
        out.append(marker_left)
        out.append(line[a:b])
        out.append(marker_right)
        last = b
    out.append(line[last:])
    return "".join(out)
