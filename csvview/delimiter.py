# csvview/delimiter.py
"""
Delimiter policy: the separators csvview recognizes and a best-effort guesser.

Usage:
    from csvview.delimiter import Delimiter, guess_delimiter

    delimiter = guess_delimiter("name;age\\nAlice;30")  # ";"
    assert delimiter == Delimiter.SEMICOLON
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence, Union

from csvview.core.exceptions import InvalidDelimiterError
from csvview.logging.logger import get_logger
from csvview.logging.tags import DELIMITER

logger = get_logger(__name__)

QUOTE = '"'

# Upper bound of characters inspected when guessing
DEFAULT_SAMPLE_SIZE = 4096


class Delimiter(str, Enum):
    """Recognized delimiters, in guessing priority order."""

    COMMA = ","
    SEMICOLON = ";"
    TAB = "\t"

    @property
    def label(self) -> str:
        return self.name.lower()


RECOGNIZED_DELIMITERS: tuple[Delimiter, ...] = (
    Delimiter.COMMA,
    Delimiter.SEMICOLON,
    Delimiter.TAB,
)

_FORBIDDEN = {QUOTE, "\r", "\n"}


def validate_delimiter(value: Union[Delimiter, str]) -> str:
    """
    Normalize a delimiter given as a Delimiter, a character or a name.

    Names are the lowercase Delimiter member names ("comma", "semicolon", "tab").
    Any other single character except the quote character and line breaks is
    accepted as a custom delimiter.

    Raises:
        InvalidDelimiterError: If the value cannot be used as a separator
    """
    if isinstance(value, Delimiter):
        return value.value

    if not isinstance(value, str):
        raise InvalidDelimiterError(f"Delimiter must be a string, got {type(value).__name__}")

    by_name = {d.label: d.value for d in Delimiter}
    if value.lower() in by_name:
        return by_name[value.lower()]

    if len(value) != 1:
        raise InvalidDelimiterError(f"Delimiter must be a single character, got {value!r}")
    if value in _FORBIDDEN:
        raise InvalidDelimiterError(f"Character {value!r} cannot be used as a delimiter")

    return value


def delimiter_label(delimiter: str) -> str:
    """Human-readable name for a delimiter ("comma", "tab", or the character itself)."""
    for d in Delimiter:
        if d.value == delimiter:
            return d.label
    return repr(delimiter)


def guess_delimiter(
    sample: str,
    candidates: Sequence[str] = RECOGNIZED_DELIMITERS,
    sample_size: int = DEFAULT_SAMPLE_SIZE,
) -> str:
    """
    Guess the delimiter of a document from its first line.

    Counts every candidate outside quoted spans in the first logical line
    (at most `sample_size` characters) and picks the most frequent one. Ties
    go to the candidate listed first; no hits at all falls back to comma.

    This is a heuristic: a header line with no separators, or one that uses
    several candidates, can guess wrong.
    """
    chars = [validate_delimiter(c) for c in candidates]
    counts = {c: 0 for c in chars}
    in_quotes = False
    prefix = sample[:sample_size]
    i = 0

    while i < len(prefix):
        char = prefix[i]
        if in_quotes:
            if char == QUOTE:
                if i + 1 < len(prefix) and prefix[i + 1] == QUOTE:
                    i += 1  # escaped quote
                else:
                    in_quotes = False
        elif char == QUOTE:
            in_quotes = True
        elif char in ("\n", "\r"):
            break
        elif char in counts:
            counts[char] += 1
        i += 1

    best = Delimiter.COMMA.value
    best_count = 0
    for candidate in chars:
        if counts[candidate] > best_count:
            best = candidate
            best_count = counts[candidate]

    logger.debug(f"{DELIMITER} Guessed {delimiter_label(best)} from counts {counts}")
    return best


__all__ = [
    "Delimiter",
    "RECOGNIZED_DELIMITERS",
    "DEFAULT_SAMPLE_SIZE",
    "QUOTE",
    "validate_delimiter",
    "delimiter_label",
    "guess_delimiter",
]
