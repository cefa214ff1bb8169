# csvview/core/exceptions.py
"""
All exceptions raised by csvview.

Hierarchy:
    CSVError
    ├── ParseError - Malformed quoting / unterminated quote
    ├── FieldLookupError - Named access of a name absent from the header (also KeyError)
    ├── InvalidDelimiterError - Unsupported delimiter value (also ValueError)
    └── ConfigError - Configuration failures
        ├── ConfigNotFoundError
        ├── ConfigParseError
        └── ConfigValidationError

I/O failures (missing files, decoding errors) are not wrapped: they reach the
caller as the OSError / UnicodeDecodeError raised by the standard library.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional, Sequence


class CSVError(Exception):
    """Base class for every csvview error."""

    pass


# =============================================================================
# Parse Errors
# =============================================================================


class ParseErrorReason(str, Enum):
    """Why a parse attempt failed."""

    UNTERMINATED_QUOTE = "unterminated_quote"
    MALFORMED_QUOTE = "malformed_quote"


class ParseError(CSVError):
    """
    Raised when text cannot be tokenized.

    Attributes:
        reason: ParseErrorReason describing the failure
        row: 0-based index of the record being parsed (header is row 0)
        line: 1-based physical line where the problem was detected
        column: 1-based character position within that line
    """

    def __init__(
        self,
        message: str,
        reason: ParseErrorReason,
        row: int,
        line: int,
        column: int,
    ):
        self.reason = reason
        self.row = row
        self.line = line
        self.column = column
        super().__init__(f"{message} (row {row}, line {line}, column {column})")


# =============================================================================
# Lookup / Argument Errors
# =============================================================================


class FieldLookupError(CSVError, KeyError):
    """A named row or column was asked for a name the header does not contain."""

    def __init__(self, name: str, header: Sequence[str]):
        self.name = name
        self.header = tuple(header)
        super().__init__(name)

    def __str__(self) -> str:
        return f"Field {self.name!r} not in header {list(self.header)!r}"


class InvalidDelimiterError(CSVError, ValueError):
    """Delimiter is not a usable single separator character."""

    pass


# =============================================================================
# Config Errors
# =============================================================================


class ConfigError(CSVError):
    """Base error for configuration issues."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path:
            message = f"{message} (file: {path})"
        super().__init__(message)


class ConfigNotFoundError(ConfigError):
    """Raised when a config file doesn't exist."""

    pass


class ConfigParseError(ConfigError):
    """Raised when YAML parsing fails."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when config doesn't match schema."""

    pass


__all__ = [
    "CSVError",
    # Parsing
    "ParseError",
    "ParseErrorReason",
    # Lookup / arguments
    "FieldLookupError",
    "InvalidDelimiterError",
    # Config
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
]
