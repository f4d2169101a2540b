"""
Error classification for pyfilereader.

Every failure raised by the library is a subclass of ReaderError and carries a
category, a severity and optional suggestions, so callers can branch on the
kind of failure instead of parsing messages.

Error Categories:
    - FILE_ACCESS: Missing or unreadable files
    - PERMISSION: Permission errors while reading
    - ENCODING: Unknown charset or undecodable content
    - PARSING: Numeric conversion of a line failed
    - PATTERN: Invalid regular expression syntax
    - INDEX: Flat offset outside the loaded document
    - CONFIGURATION: Invalid ReaderConfig values
    - VALIDATION: API used in the wrong state

Classes:
    ErrorSeverity: Error severity levels (LOW, MEDIUM, HIGH, CRITICAL)
    ErrorCategory: Error classification categories
    ReaderError: Base exception class for pyfilereader errors

Functions:
    translate_file_error: Map OS and decoding exceptions to ReaderError subclasses

Example:
    Branching on the error kind:
        >>> from pyfilereader import FileReader, ReaderError
        >>> from pyfilereader.error_handling import ErrorCategory
        >>>
        >>> reader = FileReader()
        >>> try:
        ...     reader.set_path("missing.txt")
        ... except ReaderError as e:
        ...     if e.category == ErrorCategory.FILE_ACCESS:
        ...         print(f"cannot read: {e.file_path}")
"""

from __future__ import annotations

# Import built-in exceptions before defining custom ones
import builtins
import time
from enum import Enum
from pathlib import Path
from typing import Any

BuiltinPermissionError = builtins.PermissionError


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Error categories for classification."""

    FILE_ACCESS = "file_access"
    PERMISSION = "permission"
    ENCODING = "encoding"
    PARSING = "parsing"
    PATTERN = "pattern"
    INDEX = "index"
    CONFIGURATION = "configuration"
    VALIDATION = "validation"
    UNKNOWN = "unknown"


IO_CATEGORIES = frozenset(
    {ErrorCategory.FILE_ACCESS, ErrorCategory.PERMISSION, ErrorCategory.ENCODING}
)


class ReaderError(Exception):
    """Base exception for pyfilereader errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        file_path: Path | None = None,
        suggestions: list[str] | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message: str = message
        self.category: ErrorCategory = category
        self.severity: ErrorSeverity = severity
        self.file_path: Path | None = file_path
        self.suggestions: list[str] = suggestions or []
        self.context: dict[str, Any] = context or {}
        self.timestamp: float = time.time()

    @property
    def is_io_error(self) -> bool:
        return self.category in IO_CATEGORIES


class FileAccessError(ReaderError):
    """Error reading a file. Base class of every IO failure."""

    def __init__(
        self,
        message: str,
        file_path: Path,
        context: dict[str, Any] | None = None,
        category: ErrorCategory = ErrorCategory.FILE_ACCESS,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        suggestions: list[str] | None = None,
    ) -> None:
        super().__init__(
            message,
            category=category,
            severity=severity,
            file_path=file_path,
            suggestions=suggestions,
            context=context,
        )


class PermissionError(FileAccessError):
    """Permission-related errors."""

    def __init__(
        self, message: str, file_path: Path, context: dict[str, Any] | None = None
    ) -> None:
        super().__init__(
            message,
            file_path,
            context=context,
            category=ErrorCategory.PERMISSION,
            severity=ErrorSeverity.HIGH,
            suggestions=[
                "Check file permissions",
                "Run with appropriate user privileges",
                "Verify file ownership",
            ],
        )


class EncodingError(FileAccessError):
    """File content could not be decoded with the requested charset."""

    def __init__(
        self,
        message: str,
        file_path: Path,
        encoding: str = "unknown",
        context: dict[str, Any] | None = None,
    ) -> None:
        merged_context: dict[str, Any] = {}
        if context:
            merged_context.update(context)
        merged_context["encoding"] = encoding

        super().__init__(
            message,
            file_path,
            context=merged_context,
            category=ErrorCategory.ENCODING,
            severity=ErrorSeverity.LOW,
            suggestions=[
                f"Try a different charset (current: {encoding})",
                "Check if file is binary",
            ],
        )
        self.encoding: str = encoding


class ParsingError(ReaderError):
    """A line could not be converted to a number."""

    def __init__(
        self,
        message: str,
        line_index: int,
        file_path: Path | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.PARSING,
            severity=ErrorSeverity.LOW,
            file_path=file_path,
            suggestions=["Check that every line holds a single numeric literal"],
            context=context,
        )
        self.line_index: int = line_index


class PatternError(ReaderError):
    """The regular expression could not be compiled."""

    def __init__(self, message: str, pattern: str, position: int | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.PATTERN,
            severity=ErrorSeverity.MEDIUM,
            suggestions=["Check the pattern syntax", "Escape literal metacharacters"],
            context={"pattern": pattern, "position": position},
        )
        self.pattern: str = pattern
        self.position: int | None = position


class OffsetOutOfRangeError(ReaderError, IndexError):
    """A flat character offset lies outside the flattened document."""

    def __init__(self, offset: int, total_length: int) -> None:
        super().__init__(
            f"Offset {offset} is outside the flattened text (length {total_length})",
            category=ErrorCategory.INDEX,
            severity=ErrorSeverity.MEDIUM,
            context={"offset": offset, "total_length": total_length},
        )
        self.offset: int = offset
        self.total_length: int = total_length


class ConfigurationError(ReaderError):
    """Configuration-related errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.HIGH,
            suggestions=[
                "Verify the charset and decode error handler names",
                "Use default configuration",
            ],
            context=context,
        )


class DocumentNotLoadedError(ReaderError):
    """Content was requested before any file was loaded."""

    def __init__(self, message: str = "No file has been loaded; call set_path() first") -> None:
        super().__init__(
            message,
            category=ErrorCategory.VALIDATION,
            severity=ErrorSeverity.MEDIUM,
        )


def translate_file_error(
    file_path: Path,
    operation: str,
    exception: Exception,
    logger: Any | None = None,
    encoding: str = "unknown",
) -> ReaderError:
    """
    Classify an exception raised while touching a file.

    Args:
        file_path: Path to the file that caused the error
        operation: Operation being performed (e.g., "read", "decode")
        exception: The exception that occurred
        logger: Optional ReaderLogger used to log the error
        encoding: Charset in use, recorded on encoding errors

    Returns:
        The ReaderError subclass matching the failure. The caller raises it.
    """
    error: ReaderError
    if isinstance(exception, ReaderError):
        error = exception
    elif isinstance(exception, BuiltinPermissionError):
        error = PermissionError(f"Permission denied during {operation}: {exception}", file_path)
    elif isinstance(exception, (UnicodeError, LookupError)):
        error = EncodingError(
            f"Encoding error during {operation}: {exception}", file_path, encoding=encoding
        )
    elif isinstance(exception, OSError):
        error = FileAccessError(f"Cannot {operation} file: {exception}", file_path)
    else:
        error = ReaderError(
            f"Unexpected error during {operation}: {exception}", file_path=file_path
        )

    if logger:
        logger.log_file_error(str(file_path), str(error), operation=operation)

    return error
