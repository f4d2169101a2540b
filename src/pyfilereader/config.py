"""
Configuration module for pyfilereader.

ReaderConfig holds the defaults used when loading files and searching them.
Per-call arguments on FileReader and Searcher override these defaults.

Example:
    >>> from pyfilereader.config import ReaderConfig
    >>> from pyfilereader.types import OutputFormat
    >>>
    >>> config = ReaderConfig(
    ...     charset="latin-1",
    ...     multiline=True,
    ...     ignore_case=True,
    ...     output_format=OutputFormat.JSON,
    ... )
    >>> config.validate()
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass

import regex as regex_mod

from .error_handling import ConfigurationError
from .types import OutputFormat

DECODE_ERROR_HANDLERS = ("strict", "replace", "ignore", "backslashreplace", "surrogateescape")


@dataclass(slots=True)
class ReaderConfig:
    # Loading
    charset: str = "utf-8"
    decode_errors: str = "strict"
    max_file_bytes: int = 0  # 0 = unlimited

    # Searching
    multiline: bool = False
    track_positions: bool = True
    ignore_case: bool = False
    regex_flags: int = 0  # extra regex.* flags OR-ed into every compile

    # Output
    output_format: OutputFormat = OutputFormat.TEXT

    def validate(self) -> None:
        try:
            codecs.lookup(self.charset)
        except LookupError as e:
            raise ConfigurationError(
                f"Unknown charset: {self.charset}", context={"charset": self.charset}
            ) from e
        if self.decode_errors not in DECODE_ERROR_HANDLERS:
            raise ConfigurationError(
                f"Unknown decode error handler: {self.decode_errors}",
                context={"decode_errors": self.decode_errors},
            )
        if self.max_file_bytes < 0:
            raise ConfigurationError(
                "max_file_bytes must be >= 0", context={"max_file_bytes": self.max_file_bytes}
            )

    def compile_flags(self) -> int:
        flags = self.regex_flags
        if self.ignore_case:
            flags |= regex_mod.IGNORECASE
        return flags
