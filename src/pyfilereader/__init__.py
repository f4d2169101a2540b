"""
pyfilereader: in-memory file reading and regex search with line positions.

This package reads small text files completely into memory and searches them
with regular expressions. Every match is reported with its start and end line
and the character index within those lines, including matches that run across
several lines.

Main Classes:
    FileReader: Stateful facade that loads a file and searches it
    ReaderConfig: Charset, search mode and output defaults
    Document: Immutable loaded content (lines, path, charset)
    MatchCollection: Ordered matches of one search with statistics
    LocatedMatch / MatchGroup: One match and its capture groups

Core Modules:
    api: FileReader facade
    line_store: Loading, raw bytes, flattening, numeric lines
    offset_index: Flat offset to line mapping
    matchers: Pattern compilation and match location
    searcher: Single-line and multiline search
    formatter: Text, highlighted and JSON output

Example Usage:
    >>> from pyfilereader import FileReader
    >>> reader = FileReader()
    >>> reader.set_path("fox.txt")
    >>> reader.contains_match("brown fox", multiline=True)
    True
    >>> matches = reader.regex_matches(r"(quick) (brown)?")
    >>> matches[0].group(1).text
    'quick'
"""

from .api import FileReader
from .config import ReaderConfig
from .error_handling import (
    ConfigurationError,
    DocumentNotLoadedError,
    EncodingError,
    ErrorCategory,
    ErrorSeverity,
    FileAccessError,
    OffsetOutOfRangeError,
    ParsingError,
    PatternError,
    PermissionError,
    ReaderError,
)
from .line_store import LineStore, flatten, load_document, numeric_lines, read_bytes
from .logging_config import configure_logging, disable_logging, enable_debug_logging, get_logger
from .offset_index import build_offset_table, line_number_for_offset
from .searcher import Searcher
from .types import (
    ABSENT,
    Document,
    LocatedMatch,
    MatchCollection,
    MatchGroup,
    OffsetTable,
    OutputFormat,
    SearchStats,
)

# Package metadata
__version__ = "0.1.0"
__license__ = "MIT"
__description__ = "In-memory file reading and regex search with line/character positions"

# Public API
__all__ = [
    # Main classes
    "FileReader",
    "ReaderConfig",
    "LineStore",
    "Searcher",
    # Data types
    "ABSENT",
    "Document",
    "OffsetTable",
    "MatchGroup",
    "LocatedMatch",
    "MatchCollection",
    "SearchStats",
    "OutputFormat",
    # Functions
    "load_document",
    "read_bytes",
    "flatten",
    "numeric_lines",
    "build_offset_table",
    "line_number_for_offset",
    # Logging
    "configure_logging",
    "get_logger",
    "enable_debug_logging",
    "disable_logging",
    # Exception classes
    "ReaderError",
    "FileAccessError",
    "PermissionError",
    "EncodingError",
    "ParsingError",
    "PatternError",
    "OffsetOutOfRangeError",
    "ConfigurationError",
    "DocumentNotLoadedError",
    "ErrorCategory",
    "ErrorSeverity",
    # Package metadata
    "__version__",
    "__license__",
    "__description__",
]
