# csvview/serializer.py
"""
Render a header and rows back to delimited text.

Quoting is done by the stdlib csv writer (QUOTE_MINIMAL, doubled quotes):
a field is quoted when it holds the delimiter, a quote, CR or LF. A row made
of a single empty field comes out as "" so it is not read back as a blank
line.
"""

from __future__ import annotations

import csv
import io
from typing import Iterable, Sequence

from csvview.delimiter import QUOTE, validate_delimiter
from csvview.logging.logger import get_logger
from csvview.logging.tags import SERIALIZER

logger = get_logger(__name__)

# CR and LF both belong to the writer's terminator so either one forces quoting.
_WRITER_TERMINATOR = "\r\n"


def serialize_row(fields: Sequence[str], delimiter: str) -> str:
    """Join one row's fields; does not add a line terminator."""
    buf = io.StringIO()
    writer = csv.writer(
        buf,
        delimiter=delimiter,
        quotechar=QUOTE,
        doublequote=True,
        quoting=csv.QUOTE_MINIMAL,
        lineterminator=_WRITER_TERMINATOR,
    )
    writer.writerow(fields)
    return buf.getvalue()[: -len(_WRITER_TERMINATOR)]


def enquote_if_needed(field: str, delimiter: str) -> str:
    """Wrap a field in quotes (doubling inner quotes) when it needs them."""
    if not field:
        return field
    return serialize_row([field], delimiter)


def serialize(
    header: Sequence[str],
    rows: Iterable[Sequence[str]],
    delimiter: str,
    line_terminator: str = "\n",
) -> str:
    """
    Serialize a table to text.

    Every line, including the last one, ends with `line_terminator`. An empty
    header produces no header line.

    Args:
        header: Column names
        rows: Positional rows
        delimiter: Field separator
        line_terminator: Line ending written after each row

    Returns:
        The delimited text
    """
    delimiter = validate_delimiter(delimiter)
    lines = []
    if header:
        lines.append(serialize_row(header, delimiter))
    for row in rows:
        lines.append(serialize_row(row, delimiter))

    logger.debug(f"{SERIALIZER} Serialized {len(lines)} lines")
    return "".join(line + line_terminator for line in lines)


__all__ = ["enquote_if_needed", "serialize_row", "serialize"]
