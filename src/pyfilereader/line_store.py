"""
Whole-file loading for pyfilereader.

Files are read completely into memory, decoded with an explicit charset and
split into lines without their separators. The result is an immutable
Document; LineStore keeps the most recently loaded one and swaps it only after
a load succeeds, so a failed reload leaves the previous content in place.

This is not meant for large files: a file of several hundred megabytes needs
several times that amount of memory once decoded and split.
"""

from __future__ import annotations

import time
from pathlib import Path

from .config import ReaderConfig
from .error_handling import (
    DocumentNotLoadedError,
    FileAccessError,
    ParsingError,
    translate_file_error,
)
from .logging_config import get_logger
from .types import Document
from .utils import split_lines

# float() spellings that are not plain decimal literals
_SPECIAL_FLOATS = frozenset({"nan", "inf", "infinity"})


def read_bytes(path: str | Path) -> bytes:
    """Read the raw content of ``path`` without decoding it."""
    p = Path(path)
    try:
        return p.read_bytes()
    except OSError as e:
        raise translate_file_error(p, "read", e, logger=get_logger()) from e


def load_document(
    path: str | Path,
    charset: str = "utf-8",
    errors: str = "strict",
    max_file_bytes: int = 0,
) -> Document:
    """
    Read and decode ``path`` into a Document.

    Raises:
        FileAccessError: The file is missing, unreadable or over ``max_file_bytes``
        PermissionError: The file cannot be opened for reading
        EncodingError: ``charset`` is unknown or the content does not decode
    """
    p = Path(path)
    t0 = time.perf_counter()
    logger = get_logger()
    if max_file_bytes:
        try:
            size = p.stat().st_size
        except OSError as e:
            raise translate_file_error(p, "stat", e, logger=logger) from e
        if size > max_file_bytes:
            error = FileAccessError(
                f"File is {size} bytes, over the {max_file_bytes} byte limit",
                p,
                context={"size": size, "max_file_bytes": max_file_bytes},
            )
            logger.log_file_error(str(p), str(error), operation="load")
            raise error
    raw = read_bytes(p)
    try:
        text = raw.decode(charset, errors)
    except (UnicodeError, LookupError) as e:
        raise translate_file_error(p, "decode", e, logger=logger, encoding=charset) from e

    document = Document(lines=tuple(split_lines(text)), path=p, charset=charset)
    logger.log_load(str(p), document.line_count, charset, (time.perf_counter() - t0) * 1000.0)
    return document


def flatten(document: Document) -> str:
    return document.text


def numeric_lines(document: Document) -> list[float]:
    """
    Parse every line as a float.

    Underscore digit separators and the nan/inf spellings are rejected even
    though float() accepts them.

    Raises:
        ParsingError: On the first line that is not a numeric literal; no
            partial result is returned.
    """
    values: list[float] = []
    for i, line in enumerate(document.lines):
        try:
            if "_" in line or line.strip().lstrip("+-").lower() in _SPECIAL_FLOATS:
                raise ValueError(line)
            values.append(float(line))
        except ValueError as e:
            raise ParsingError(
                f"Line {i} could not be parsed to a number: {line!r}",
                line_index=i,
                file_path=document.path,
            ) from e
    return values


class LineStore:
    """Holds the Document of the most recently loaded file."""

    def __init__(self, config: ReaderConfig | None = None) -> None:
        self.cfg = config or ReaderConfig()
        self.cfg.validate()
        self._document: Document | None = None

    @property
    def loaded(self) -> bool:
        return self._document is not None

    @property
    def document(self) -> Document:
        if self._document is None:
            raise DocumentNotLoadedError()
        return self._document

    @property
    def path(self) -> Path | None:
        return self._document.path if self._document is not None else None

    @property
    def file_name(self) -> str | None:
        return self._document.file_name if self._document is not None else None

    def load(self, path: str | Path, charset: str | None = None) -> Document:
        document = load_document(
            path,
            charset=charset or self.cfg.charset,
            errors=self.cfg.decode_errors,
            max_file_bytes=self.cfg.max_file_bytes,
        )
        self._document = document
        return document

    def raw_bytes(self) -> bytes:
        path = self.document.path
        if path is None:
            raise DocumentNotLoadedError("Document has no backing file")
        return read_bytes(path)
