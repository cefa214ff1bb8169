# csvview/core/__init__.py
"""Core contracts shared by the parser, views and facade."""

from .exceptions import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    CSVError,
    FieldLookupError,
    InvalidDelimiterError,
    ParseError,
    ParseErrorReason,
)

__all__ = [
    "CSVError",
    "ParseError",
    "ParseErrorReason",
    "FieldLookupError",
    "InvalidDelimiterError",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
]
