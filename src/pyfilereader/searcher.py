"""
Regex search over a loaded Document.

Single-line mode runs the pattern against each line on its own, so a match
never crosses a line boundary. Multiline mode runs it once against the
flattened text (lines joined with no separator) and maps every match back to
line coordinates through the document's offset table.

Because the flattened text has no newline characters, a pattern meant to span
lines must match the adjoining text directly: "brown fox" matches the lines
"the quick brown" and " fox".
"""

from __future__ import annotations

import time

from .config import ReaderConfig
from .logging_config import get_logger
from .matchers import build_located_match, compile_pattern
from .types import Document, LocatedMatch, MatchCollection, SearchStats


class Searcher:
    def __init__(self, config: ReaderConfig | None = None) -> None:
        self.cfg = config or ReaderConfig()
        self.cfg.validate()
        self.logger = get_logger()

    def find_first(self, document: Document, pattern: str, multiline: bool | None = None) -> bool:
        """Return True if ``pattern`` matches anywhere in ``document``."""
        multiline = self.cfg.multiline if multiline is None else multiline
        rx = compile_pattern(pattern, self.cfg.compile_flags())
        if multiline:
            return bool(document.lines) and rx.search(document.text) is not None
        return any(rx.search(line) is not None for line in document.lines)

    def find_all(
        self,
        document: Document,
        pattern: str,
        multiline: bool | None = None,
        track_positions: bool | None = None,
    ) -> MatchCollection:
        """
        Collect every non-overlapping match of ``pattern`` in discovery order.

        Args:
            document: Content to search
            pattern: Regular expression, compiled once for the whole call
            multiline: Search the flattened text instead of each line
            track_positions: Report line numbers; when False lines are ABSENT
                and indices are offsets into the searched text

        Raises:
            PatternError: ``pattern`` is invalid; nothing is scanned
        """
        multiline = self.cfg.multiline if multiline is None else multiline
        track = self.cfg.track_positions if track_positions is None else track_positions

        rx = compile_pattern(pattern, self.cfg.compile_flags())
        self.logger.log_search_start(pattern, multiline, lines=document.line_count)
        t0 = time.perf_counter()

        items: list[LocatedMatch] = []
        if multiline:
            if document.lines:
                table = document.offset_table if track else None
                for m in rx.finditer(document.text):
                    items.append(build_located_match(m, table=table))
        else:
            for li, line in enumerate(document.lines):
                for m in rx.finditer(line):
                    items.append(build_located_match(m, line_index=li if track else None))

        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        stats = SearchStats(
            lines_scanned=document.line_count,
            matches=len(items),
            elapsed_ms=elapsed_ms,
            multiline=multiline,
        )
        self.logger.log_search_complete(pattern, len(items), elapsed_ms, multiline=multiline)
        return MatchCollection(items=tuple(items), stats=stats)
