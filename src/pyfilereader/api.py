"""
Main API module for pyfilereader.

FileReader is the entry point for reading a small file into memory and
searching it with regular expressions. It keeps the Document of the last
successfully loaded file and exposes it as a string, as lines, as numbers or
as raw bytes.

Example:
    >>> from pyfilereader import FileReader
    >>>
    >>> reader = FileReader()
    >>> reader.set_path("notes.txt")
    >>> for m in reader.regex_matches(r"brown fox", multiline=True):
    ...     print(m.start_line, m.start_index, m.end_line, m.end_index)
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

from .config import ReaderConfig
from .formatter import format_result, render_highlight_console
from .line_store import LineStore, numeric_lines
from .searcher import Searcher
from .types import Document, MatchCollection, OutputFormat


class FileReader:
    def __init__(self, config: ReaderConfig | None = None) -> None:
        self.cfg = config or ReaderConfig()
        self.cfg.validate()
        self.store = LineStore(self.cfg)
        self.searcher = Searcher(self.cfg)

    def set_path(self, path: str | Path, charset: str | None = None) -> Document:
        """Load ``path``, replacing the current content only if loading succeeds."""
        return self.store.load(path, charset)

    @property
    def document(self) -> Document:
        return self.store.document

    @property
    def path(self) -> Path | None:
        return self.store.path

    @property
    def file(self) -> Path | None:
        path = self.store.path
        return path.resolve() if path is not None else None

    @property
    def file_name(self) -> str | None:
        return self.store.file_name

    def data_string(self) -> str:
        return self.document.text

    def data_lines(self) -> list[str]:
        return list(self.document.lines)

    def numeric_data_lines(self) -> list[float]:
        return numeric_lines(self.document)

    def data_bytes(self) -> bytes:
        return self.store.raw_bytes()

    def contains_match(self, pattern: str, multiline: bool | None = None) -> bool:
        return self.searcher.find_first(self.document, pattern, multiline)

    def regex_matches(
        self,
        pattern: str,
        multiline: bool | None = None,
        track_positions: bool | None = None,
    ) -> MatchCollection:
        return self.searcher.find_all(self.document, pattern, multiline, track_positions)

    def render(self, collection: MatchCollection, fmt: OutputFormat | None = None) -> str:
        return format_result(collection, fmt or self.cfg.output_format, self.document)

    def print_highlighted(
        self, collection: MatchCollection, console: Console | None = None
    ) -> None:
        """Print matches to a rich console with the matched spans highlighted."""
        render_highlight_console(collection, self.document, console)
