# csvview/views/named.py
"""Name-keyed view: rows and columns addressed by header name."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Iterator, Optional, Sequence

from csvview.core.exceptions import FieldLookupError
from csvview.logging.logger import get_logger
from csvview.logging.tags import VIEW
from csvview.parser.tokenizer import iter_rows
from csvview.serializer import serialize

logger = get_logger(__name__)


def build_index(header: Sequence[str]) -> Mapping[str, int]:
    """Map each header name to its first position; later duplicates are unreachable."""
    index: dict[str, int] = {}
    for i, name in enumerate(header):
        index.setdefault(name, i)
    return MappingProxyType(index)


class NamedRow(Mapping):
    """
    Read-only mapping over one parsed row.

    The raw fields are kept untouched in `fields`; lookups go through the
    header index. A name past the end of a short row reads as "". A name
    that is not in the header raises FieldLookupError.
    """

    __slots__ = ("_fields", "_header", "_index")

    def __init__(self, fields: Sequence[str], header: Sequence[str], index: Mapping[str, int]):
        self._fields = tuple(fields)
        self._header = tuple(header)
        self._index = index

    @property
    def fields(self) -> tuple[str, ...]:
        return self._fields

    def __getitem__(self, name: str) -> str:
        try:
            i = self._index[name]
        except KeyError:
            raise FieldLookupError(name, self._header) from None
        return self._fields[i] if i < len(self._fields) else ""

    def __iter__(self) -> Iterator[str]:
        return iter(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def normalized(self) -> tuple[str, ...]:
        """Fields padded with "" or truncated to the header length."""
        width = len(self._header)
        return self._fields[:width] + ("",) * (width - len(self._fields))

    def __repr__(self) -> str:
        return f"NamedRow({dict(self.items())!r})"


class NamedView:
    """
    Rows as name-keyed mappings, columns as a read-only mapping of name → values.

    Unique header names are assumed; with duplicates the first occurrence
    wins for both rows and columns.

    Example:
        view = NamedView(("id", "name"), "id,name\\n1,Ann\\n", ",")
        view.rows[0]["name"]   # "Ann"
        view.columns["id"]     # ("1",)
    """

    def __init__(
        self,
        header: Sequence[str],
        text: str,
        delimiter: str,
        load_columns: bool = True,
        row_limit: Optional[int] = None,
    ):
        header = tuple(header)
        index = build_index(header)
        self._rows: tuple[NamedRow, ...] = tuple(
            NamedRow(fields, header, index)
            for fields in iter_rows(text, delimiter, start_at=1, row_limit=row_limit)
        )
        self._columns: Optional[Mapping[str, tuple[str, ...]]] = None

        if load_columns:
            self._columns = MappingProxyType(
                {name: tuple(row[name] for row in self._rows) for name in index}
            )

        logger.debug(f"{VIEW} Named view: {len(self._rows)} rows, columns loaded={load_columns}")

    @property
    def rows(self) -> tuple[NamedRow, ...]:
        return self._rows

    @property
    def columns(self) -> Optional[Mapping[str, tuple[str, ...]]]:
        return self._columns

    def serialize(self, header: Sequence[str], delimiter: str, line_terminator: str = "\n") -> str:
        return serialize(
            header,
            [row.normalized() for row in self._rows],
            delimiter,
            line_terminator=line_terminator,
        )


__all__ = ["NamedRow", "NamedView", "build_index"]
