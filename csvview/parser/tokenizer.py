# csvview/parser/tokenizer.py
"""
Character-scan tokenizer turning delimited text into rows of string fields.

Quoting rules:
    - A field that starts with a quote is quoted; delimiters and line breaks
      inside it are literal.
    - Inside a quoted field, two quotes in a row decode to one literal quote.
    - A closing quote must be followed by a delimiter, a line break or the end
      of input.
    - A quote anywhere else in an unquoted field is rejected.

Line breaks are \\n, \\r\\n or a bare \\r. A trailing line break does not open
an extra row, and blank lines are skipped.

Row lengths are not checked here; reconciling them with the header is up to
the views.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator, Optional

from csvview.core.exceptions import ParseError, ParseErrorReason
from csvview.delimiter import QUOTE, validate_delimiter
from csvview.logging.logger import get_logger
from csvview.logging.tags import PARSER

logger = get_logger(__name__)


class ParserState(Enum):
    """States of the tokenizer state machine."""

    FIELD_START = "field_start"
    UNQUOTED_FIELD = "unquoted_field"
    QUOTED_FIELD = "quoted_field"
    QUOTE_IN_QUOTED_FIELD = "quote_in_quoted_field"
    ROW_END = "row_end"


def _check_row_limit(row_limit: Optional[int]) -> None:
    if row_limit is None:
        return
    if isinstance(row_limit, bool) or not isinstance(row_limit, int) or row_limit < 1:
        raise ValueError(f"row_limit must be a positive integer or None, got {row_limit!r}")


class _Scanner:
    """Mutable state for a single pass over the text."""

    def __init__(self, text: str, delimiter: str):
        self.text = text
        self.delimiter = delimiter
        self.state = ParserState.FIELD_START
        self.field: list[str] = []
        self.fields: list[str] = []
        self.quoted_row = False
        self.row = 0
        self.line = 1
        self.line_start = 0

    def error(self, message: str, reason: ParseErrorReason, pos: int) -> ParseError:
        return ParseError(
            message,
            reason=reason,
            row=self.row,
            line=self.line,
            column=pos - self.line_start + 1,
        )

    def end_field(self) -> None:
        self.fields.append("".join(self.field))
        self.field = []

    def end_row(self) -> Optional[list[str]]:
        """Close the current row; returns None for a blank line."""
        self.end_field()
        fields, self.fields = self.fields, []
        quoted, self.quoted_row = self.quoted_row, False
        self.state = ParserState.ROW_END
        if len(fields) == 1 and fields[0] == "" and not quoted:
            return None
        self.row += 1
        return fields

    def newline(self, pos: int) -> int:
        """Consume a line break starting at pos; returns the next position."""
        if self.text[pos] == "\r" and pos + 1 < len(self.text) and self.text[pos + 1] == "\n":
            pos += 1
        self.line += 1
        self.line_start = pos + 1
        return pos + 1


def iter_rows(
    text: str,
    delimiter: str,
    start_at: int = 0,
    row_limit: Optional[int] = None,
) -> Iterator[list[str]]:
    """
    Lazily tokenize text into rows.

    Args:
        text: Decoded document text
        delimiter: Field separator (validated with validate_delimiter)
        start_at: Number of leading rows to skip (1 skips a header row)
        row_limit: Stop after this many rows have been yielded (None = all)

    Yields:
        Each row as a list of field strings

    Raises:
        ParseError: On unterminated or misplaced quotes
        ValueError: If row_limit is not a positive integer
    """
    _check_row_limit(row_limit)
    delimiter = validate_delimiter(delimiter)
    scanner = _Scanner(text, delimiter)
    yielded = 0
    skipped = 0
    pos = 0
    length = len(text)

    def emit(row: Optional[list[str]]) -> bool:
        """Returns True when the row should be handed to the caller."""
        nonlocal skipped
        if row is None:
            return False
        if skipped < start_at:
            skipped += 1
            return False
        return True

    while pos < length:
        char = text[pos]
        state = scanner.state

        if state in (ParserState.FIELD_START, ParserState.ROW_END):
            if char == QUOTE:
                scanner.state = ParserState.QUOTED_FIELD
                scanner.quoted_row = True
                pos += 1
            elif char == delimiter:
                scanner.end_field()
                scanner.state = ParserState.FIELD_START
                pos += 1
            elif char in ("\n", "\r"):
                row = scanner.end_row()
                pos = scanner.newline(pos)
                if emit(row):
                    yield row
                    yielded += 1
                    if row_limit is not None and yielded >= row_limit:
                        return
            else:
                scanner.field.append(char)
                scanner.state = ParserState.UNQUOTED_FIELD
                pos += 1

        elif state == ParserState.UNQUOTED_FIELD:
            if char == delimiter:
                scanner.end_field()
                scanner.state = ParserState.FIELD_START
                pos += 1
            elif char in ("\n", "\r"):
                row = scanner.end_row()
                pos = scanner.newline(pos)
                if emit(row):
                    yield row
                    yielded += 1
                    if row_limit is not None and yielded >= row_limit:
                        return
            elif char == QUOTE:
                raise scanner.error(
                    "Quote inside an unquoted field",
                    ParseErrorReason.MALFORMED_QUOTE,
                    pos,
                )
            else:
                scanner.field.append(char)
                pos += 1

        elif state == ParserState.QUOTED_FIELD:
            if char == QUOTE:
                scanner.state = ParserState.QUOTE_IN_QUOTED_FIELD
                pos += 1
            elif char in ("\n", "\r"):
                # Literal line break; keep \r\n intact
                start = pos
                pos = scanner.newline(pos)
                scanner.field.append(text[start:pos])
            else:
                scanner.field.append(char)
                pos += 1

        elif state == ParserState.QUOTE_IN_QUOTED_FIELD:
            if char == QUOTE:
                scanner.field.append(QUOTE)
                scanner.state = ParserState.QUOTED_FIELD
                pos += 1
            elif char == delimiter:
                scanner.end_field()
                scanner.state = ParserState.FIELD_START
                pos += 1
            elif char in ("\n", "\r"):
                row = scanner.end_row()
                pos = scanner.newline(pos)
                if emit(row):
                    yield row
                    yielded += 1
                    if row_limit is not None and yielded >= row_limit:
                        return
            else:
                raise scanner.error(
                    f"Unexpected character {char!r} after closing quote",
                    ParseErrorReason.MALFORMED_QUOTE,
                    pos,
                )

    # End of input
    if scanner.state == ParserState.QUOTED_FIELD:
        raise scanner.error(
            "Quoted field is never closed",
            ParseErrorReason.UNTERMINATED_QUOTE,
            pos,
        )
    if scanner.state != ParserState.ROW_END:
        row = scanner.end_row()
        if emit(row):
            yield row


def parse(text: str, delimiter: str, row_limit: Optional[int] = None) -> list[list[str]]:
    """
    Tokenize the whole text (or its first `row_limit` rows).

    The result is all-or-nothing: a ParseError anywhere in the scanned part
    means no rows are returned.
    """
    rows = list(iter_rows(text, delimiter, row_limit=row_limit))
    logger.debug(f"{PARSER} Parsed {len(rows)} rows (limit={row_limit})")
    return rows


__all__ = ["ParserState", "iter_rows", "parse"]
