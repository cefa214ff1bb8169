# csvview/views/enumerated.py
"""Positional view: rows are field tuples, columns are (header, values) pairs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from csvview.logging.logger import get_logger
from csvview.logging.tags import VIEW
from csvview.parser.tokenizer import iter_rows
from csvview.serializer import serialize

logger = get_logger(__name__)


@dataclass(frozen=True)
class Column:
    """One column of an EnumeratedView."""

    header: str
    rows: tuple[str, ...] = field(default_factory=tuple)


class EnumeratedView:
    """
    Rows as positional field tuples.

    Rows keep exactly the fields the tokenizer produced, so a short row stays
    short. Columns read missing trailing fields as "" and ignore fields past
    the end of the header. Rows and columns are built once and are read-only.

    Example:
        view = EnumeratedView(("id", "name"), "id,name\\n1,Ann\\n", ",")
        view.rows          # (("1", "Ann"),)
        view.columns[1]    # Column(header="name", rows=("Ann",))
    """

    def __init__(
        self,
        header: Sequence[str],
        text: str,
        delimiter: str,
        load_columns: bool = True,
        row_limit: Optional[int] = None,
    ):
        self._rows: tuple[tuple[str, ...], ...] = tuple(
            tuple(fields) for fields in iter_rows(text, delimiter, start_at=1, row_limit=row_limit)
        )
        self._columns: Optional[tuple[Column, ...]] = None

        if load_columns:
            self._columns = tuple(
                Column(header=name, rows=tuple(row[i] if i < len(row) else "" for row in self._rows))
                for i, name in enumerate(header)
            )

        logger.debug(
            f"{VIEW} Enumerated view: {len(self._rows)} rows, columns loaded={load_columns}"
        )

    @property
    def rows(self) -> tuple[tuple[str, ...], ...]:
        return self._rows

    @property
    def columns(self) -> Optional[tuple[Column, ...]]:
        return self._columns

    def serialize(self, header: Sequence[str], delimiter: str, line_terminator: str = "\n") -> str:
        return serialize(header, self._rows, delimiter, line_terminator=line_terminator)


__all__ = ["Column", "EnumeratedView"]
