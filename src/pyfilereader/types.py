"""
Core data types for pyfilereader.

Documents, offset tables and match results are immutable values. A Document is
produced by a load and replaced wholesale by the next one; the offset table and
flattened text derived from it are cached on first use.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from pathlib import Path

# Position value for lines or indices that are not tracked or not available.
ABSENT = -1


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"
    HIGHLIGHT = "highlight"


@dataclass(frozen=True, slots=True)
class OffsetTable:
    """Cumulative line lengths: entry i is the length of lines 0..i combined."""

    cumulative: tuple[int, ...] = ()

    def __len__(self) -> int:
        return len(self.cumulative)

    def __getitem__(self, index: int) -> int:
        return self.cumulative[index]

    @property
    def total_length(self) -> int:
        return self.cumulative[-1] if self.cumulative else 0

    def line_base(self, line_index: int) -> int:
        """Flat offset at which ``line_index`` starts."""
        from .offset_index import line_base

        return line_base(self, line_index)

    def line_number_for_offset(self, offset: int) -> int:
        from .offset_index import line_number_for_offset

        return line_number_for_offset(self, offset)


@dataclass(frozen=True)
class Document:
    """
    Loaded file content.

    Attributes:
        lines: File lines in order, without line separators
        path: Source file, or None for in-memory content
        charset: Charset the file was decoded with
    """

    lines: tuple[str, ...] = ()
    path: Path | None = None
    charset: str = "utf-8"

    @classmethod
    def from_text(
        cls, text: str, path: Path | None = None, charset: str = "utf-8"
    ) -> Document:
        from .utils import split_lines

        return cls(lines=tuple(split_lines(text)), path=path, charset=charset)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def file_name(self) -> str | None:
        return self.path.name if self.path is not None else None

    @cached_property
    def text(self) -> str:
        """All lines concatenated with no separator."""
        return "".join(self.lines)

    @cached_property
    def offset_table(self) -> OffsetTable:
        from .offset_index import build_offset_table

        return build_offset_table(self)

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)


@dataclass(frozen=True, slots=True)
class MatchGroup:
    """
    One capture group of one match.

    ``text`` is None when the group did not take part in the match; all
    position fields are then ABSENT.
    """

    index: int
    text: str | None
    start_line: int
    end_line: int
    start_index: int
    end_index: int
    name: str | None = None

    @property
    def matched(self) -> bool:
        return self.text is not None

    @property
    def span(self) -> tuple[int, int]:
        return self.start_index, self.end_index


@dataclass(frozen=True, slots=True)
class LocatedMatch:
    """A match occurrence; ``groups[0]`` is the whole match."""

    groups: tuple[MatchGroup, ...]

    @property
    def group_count(self) -> int:
        return len(self.groups)

    def group(self, key: int | str) -> MatchGroup | None:
        """Look up a group by number or name. Unknown keys return None."""
        if isinstance(key, str):
            for g in self.groups:
                if g.name == key:
                    return g
            return None
        if 0 <= key < len(self.groups):
            return self.groups[key]
        return None

    @property
    def text(self) -> str:
        return self.groups[0].text or ""

    @property
    def start_line(self) -> int:
        return self.groups[0].start_line

    @property
    def end_line(self) -> int:
        return self.groups[0].end_line

    @property
    def start_index(self) -> int:
        return self.groups[0].start_index

    @property
    def end_index(self) -> int:
        return self.groups[0].end_index


@dataclass(frozen=True, slots=True)
class SearchStats:
    lines_scanned: int = 0
    matches: int = 0
    elapsed_ms: float = 0.0
    multiline: bool = False


@dataclass(frozen=True, slots=True)
class MatchCollection:
    items: tuple[LocatedMatch, ...] = ()
    stats: SearchStats = field(default_factory=SearchStats)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[LocatedMatch]:
        return iter(self.items)

    def __getitem__(self, index: int) -> LocatedMatch:
        return self.items[index]

    def __bool__(self) -> bool:
        return bool(self.items)

    @property
    def match_count(self) -> int:
        return len(self.items)

    @property
    def match_group_count(self) -> int:
        """Group count of the first match, including group 0; 0 when empty."""
        return self.items[0].group_count if self.items else 0

    @property
    def total_group_count(self) -> int:
        return sum(m.group_count for m in self.items)

    def get_match(self, index: int) -> LocatedMatch | None:
        if 0 <= index < len(self.items):
            return self.items[index]
        return None

    def get_match_group(self, match: int, group: int | str) -> str | None:
        """Text of one group of one match, or None if either is absent."""
        m = self.get_match(match)
        if m is None:
            return None
        g = m.group(group)
        return g.text if g is not None else None
