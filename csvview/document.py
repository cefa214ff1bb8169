# csvview/document.py
"""
CSV facade: header, source text, delimiter and the view built over them.

Two ready-made variants:
    - EnumeratedCSV: fields addressed by position
    - NamedCSV: fields addressed by header name (unique names assumed)

Usage:
    from csvview import EnumeratedCSV, NamedCSV

    csv = NamedCSV.from_string("id,name\\n1,Ann\\n2,Bob\\n")
    csv.header            # ("id", "name")
    csv.rows[0]["name"]   # "Ann"
    csv.columns["id"]     # ("1", "2")

    enumerated = EnumeratedCSV("a;b\\n1;2\\n", delimiter=";")
    enumerated.rows       # (("1", "2"),)
    enumerated.serialized # "a;b\\n1;2\\n"
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Generic, Optional, Sequence, TypeVar, Union

from csvview.config.schema import CSVConfig, ViewKind
from csvview.delimiter import RECOGNIZED_DELIMITERS, guess_delimiter, validate_delimiter
from csvview.io.loader import read_resource, read_text
from csvview.logging.logger import get_logger
from csvview.logging.tags import PARSER
from csvview.parser.tokenizer import parse
from csvview.views.enumerated import EnumeratedView
from csvview.views.named import NamedView

logger = get_logger(__name__)

V = TypeVar("V", EnumeratedView, NamedView)
C = TypeVar("C", bound="CSV")


class CSV(Generic[V]):
    """
    A parsed delimited document.

    Construction parses the header line first (row limit 1), then builds the
    view over the full text. A ParseError aborts construction; there is no
    partially built object. Nothing is reassigned afterwards: to reparse,
    build a new instance.

    Attributes (read-only):
        header: Field names from the first row
        text: Unparsed contents
        delimiter: Separator used to parse `text` and to serialize again
        content: The view (EnumeratedView or NamedView)
    """

    view_class: type = EnumeratedView
    recognized_delimiters = RECOGNIZED_DELIMITERS

    def __init__(
        self,
        text: str,
        delimiter: str,
        load_columns: bool = True,
        row_limit: Optional[int] = None,
        line_terminator: str = "\n",
        view_class: Optional[type] = None,
    ):
        self._text = text
        self._delimiter = validate_delimiter(delimiter)
        self._line_terminator = line_terminator
        first = parse(text, self._delimiter, row_limit=1)
        self._header: tuple[str, ...] = tuple(first[0]) if first else ()
        self._content: V = (view_class or self.view_class)(
            self._header,
            text,
            self._delimiter,
            load_columns=load_columns,
            row_limit=row_limit,
        )
        logger.debug(
            f"{PARSER} Loaded {type(self._content).__name__}: "
            f"{len(self._header)} columns, {len(self._content.rows)} rows"
        )

    # -------------------------------------------------------------------------
    # Read-only state
    # -------------------------------------------------------------------------

    @property
    def header(self) -> tuple[str, ...]:
        return self._header

    @property
    def text(self) -> str:
        return self._text

    @property
    def delimiter(self) -> str:
        return self._delimiter

    @property
    def line_terminator(self) -> str:
        return self._line_terminator

    @property
    def content(self) -> V:
        return self._content

    # -------------------------------------------------------------------------
    # View delegation
    # -------------------------------------------------------------------------

    @property
    def rows(self) -> Sequence[Any]:
        return self.content.rows

    @property
    def columns(self) -> Optional[Any]:
        """None if load_columns was False."""
        return self.content.columns

    @property
    def serialized(self) -> str:
        """Serialized text; the named view normalizes rows to the header length."""
        return self.content.serialize(
            self.header, self.delimiter, line_terminator=self.line_terminator
        )

    def to_bytes(self, encoding: str = "utf-8") -> bytes:
        """Serialized text encoded with `encoding`."""
        return self.serialized.encode(encoding)

    def __str__(self) -> str:
        return self.serialized

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(header={list(self.header)}, rows={len(self.rows)} rows, "
            f"delimiter={self.delimiter!r})"
        )

    # -------------------------------------------------------------------------
    # Convenience constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_string(
        cls: type[C],
        text: str,
        delimiter: Optional[str] = None,
        load_columns: bool = True,
        row_limit: Optional[int] = None,
    ) -> C:
        """Parse text, guessing the delimiter when none is given."""
        if delimiter is None:
            delimiter = guess_delimiter(text)
        return cls(text, delimiter, load_columns=load_columns, row_limit=row_limit)

    @classmethod
    def from_path(
        cls: type[C],
        path: Union[str, Path],
        delimiter: Optional[str] = None,
        encoding: str = "utf-8",
        load_columns: bool = True,
        row_limit: Optional[int] = None,
    ) -> C:
        """
        Load and parse a file.

        Raises:
            ParseError: If the contents are malformed
            OSError / UnicodeDecodeError: Passed through from reading the file
        """
        text = read_text(path, encoding=encoding)
        return cls.from_string(text, delimiter, load_columns=load_columns, row_limit=row_limit)

    @classmethod
    def from_resource(
        cls: type[C],
        package: str,
        name: str,
        extension: Optional[str] = None,
        delimiter: Optional[str] = None,
        encoding: str = "utf-8",
        load_columns: bool = True,
    ) -> Optional[C]:
        """
        Load a data file shipped inside a package.

        Returns:
            The parsed document, or None if the resource does not exist.
            A resource that exists but is malformed still raises ParseError.
        """
        text = read_resource(package, name, extension=extension, encoding=encoding)
        if text is None:
            return None
        return cls.from_string(text, delimiter, load_columns=load_columns)

    @classmethod
    def from_config(cls, text: str, config: CSVConfig) -> "CSV":
        """
        Parse text with the settings of a CSVConfig.

        Called on CSV itself, the view comes from `config.view`; called on a
        subclass, the subclass view is kept.
        """
        delimiter = config.delimiter
        if delimiter is None:
            delimiter = guess_delimiter(text, sample_size=config.guess_sample_size)

        target = cls
        if cls is CSV:
            target = NamedCSV if config.view == ViewKind.NAMED else EnumeratedCSV

        return target(
            text,
            delimiter,
            load_columns=config.load_columns,
            row_limit=config.row_limit,
            line_terminator=config.line_terminator,
        )


class EnumeratedCSV(CSV[EnumeratedView]):
    """
    CSV exposing rows as field tuples and columns as Column pairs.

    Example:
        csv = EnumeratedCSV.from_string("id,name\\n1,Ann\\n")
        ids = [c for c in csv.columns if c.header == "id"][0].rows
    """

    view_class = EnumeratedView


class NamedCSV(CSV[NamedView]):
    """
    CSV for which unique column names are assumed.

    Example:
        csv = NamedCSV.from_string("first,last\\nAda,Lovelace\\n")
        row = csv.rows[0]
        full_name = row["first"] + " " + row["last"]
    """

    view_class = NamedView


__all__ = ["CSV", "EnumeratedCSV", "NamedCSV"]
