"""
Match location for pyfilereader.

This module turns matches produced by the regex engine into LocatedMatch
values. Offsets reported by the engine are relative to the text that was
searched: a single line in single-line mode, or the flattened document in
multiline mode. The helpers here translate them into line numbers and
in-line character indices.

Functions:
    compile_pattern: Cached pattern compilation raising PatternError
    locate_single_line: Group located on a known line
    locate_no_line_info: Group with raw offsets and untracked lines
    locate_multiline: Flat offsets mapped to (line, index) pairs
    build_located_match: One LocatedMatch with every capture group

Example:
    >>> from pyfilereader.matchers import compile_pattern, build_located_match
    >>> from pyfilereader.types import Document
    >>>
    >>> doc = Document(lines=("the quick brown", " fox"))
    >>> rx = compile_pattern("brown fox")
    >>> m = build_located_match(rx.search(doc.text), table=doc.offset_table)
    >>> (m.start_line, m.end_line, m.start_index, m.end_index)
    (0, 1, 10, 4)
"""

from __future__ import annotations

from functools import lru_cache

import regex as regex_mod

from .error_handling import PatternError
from .offset_index import line_base, line_number_for_offset
from .types import ABSENT, LocatedMatch, MatchGroup, OffsetTable


@lru_cache(maxsize=64)
def _get_compiled_regex(pattern: str, flags: int) -> regex_mod.Pattern:
    return regex_mod.compile(pattern, flags=flags)


def compile_pattern(pattern: str, flags: int = 0) -> regex_mod.Pattern:
    """Compile ``pattern``, raising PatternError on invalid syntax."""
    try:
        return _get_compiled_regex(pattern, flags)
    except regex_mod.error as e:
        raise PatternError(
            f"Invalid regular expression {pattern!r}: {e}", pattern, getattr(e, "pos", None)
        ) from e


def _group_names(match: regex_mod.Match) -> dict[int, str]:
    return {idx: name for name, idx in match.re.groupindex.items()}


def _absent_group(index: int, name: str | None) -> MatchGroup:
    return MatchGroup(
        index=index,
        text=None,
        start_line=ABSENT,
        end_line=ABSENT,
        start_index=ABSENT,
        end_index=ABSENT,
        name=name,
    )


def locate_single_line(
    line_index: int, match: regex_mod.Match, group: int, name: str | None = None
) -> MatchGroup:
    start, end = match.span(group)
    if start < 0:
        return _absent_group(group, name)
    return MatchGroup(
        index=group,
        text=match.group(group),
        start_line=line_index,
        end_line=line_index,
        start_index=start,
        end_index=end,
        name=name,
    )


def locate_no_line_info(match: regex_mod.Match, group: int, name: str | None = None) -> MatchGroup:
    start, end = match.span(group)
    if start < 0:
        return _absent_group(group, name)
    return MatchGroup(
        index=group,
        text=match.group(group),
        start_line=ABSENT,
        end_line=ABSENT,
        start_index=start,
        end_index=end,
        name=name,
    )


def locate_multiline(
    flat_start: int, flat_end: int, table: OffsetTable
) -> tuple[int, int, int, int]:
    """
    Map a span of the flattened text to line coordinates.

    Returns:
        (start_line, end_line, start_index, end_index) where the indices are
        relative to the start of their respective lines.
    """
    start_line = line_number_for_offset(table, flat_start)
    end_line = line_number_for_offset(table, flat_end)
    start_index = flat_start - line_base(table, start_line)
    end_index = flat_end - line_base(table, end_line)
    return start_line, end_line, start_index, end_index


def _locate_flat_group(
    match: regex_mod.Match, group: int, table: OffsetTable, name: str | None
) -> MatchGroup:
    flat_start, flat_end = match.span(group)
    if flat_start < 0:
        return _absent_group(group, name)
    start_line, end_line, start_index, end_index = locate_multiline(flat_start, flat_end, table)
    return MatchGroup(
        index=group,
        text=match.group(group),
        start_line=start_line,
        end_line=end_line,
        start_index=start_index,
        end_index=end_index,
        name=name,
    )


def build_located_match(
    match: regex_mod.Match,
    *,
    line_index: int | None = None,
    table: OffsetTable | None = None,
) -> LocatedMatch:
    """
    Build a LocatedMatch holding group 0 through the pattern's last group.

    With ``table`` the match offsets are flat offsets into the flattened
    document; with ``line_index`` they are offsets into that line. With
    neither, lines are left as ABSENT.
    """
    names = _group_names(match)
    groups: list[MatchGroup] = []
    for i in range(match.re.groups + 1):
        name = names.get(i)
        if table is not None:
            groups.append(_locate_flat_group(match, i, table, name))
        elif line_index is not None:
            groups.append(locate_single_line(line_index, match, i, name))
        else:
            groups.append(locate_no_line_info(match, i, name))
    return LocatedMatch(groups=tuple(groups))
