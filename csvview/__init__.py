# csvview/__init__.py
"""
csvview - parse delimited text into tables and serialize it back.

Two views over the same parsed data:

1. **EnumeratedCSV**: rows are field tuples, columns are (header, values) pairs.
2. **NamedCSV**: rows are read-only mappings keyed by header name, columns are
   a read-only mapping of name → values.

Usage:
    from csvview import NamedCSV, EnumeratedCSV

    csv = NamedCSV.from_string('name,city\\nAlice,"Paris, FR"\\n')
    csv.rows[0]["city"]       # 'Paris, FR'

    csv = EnumeratedCSV.from_path("data.tsv", load_columns=False)
    csv.columns is None       # True
    csv.serialized            # text again, re-quoted where needed

Low-level pieces:
    from csvview.parser import parse
    from csvview.serializer import serialize
    from csvview.delimiter import guess_delimiter
"""

from csvview.core.exceptions import (
    ConfigError,
    CSVError,
    FieldLookupError,
    InvalidDelimiterError,
    ParseError,
    ParseErrorReason,
)
from csvview.delimiter import Delimiter, guess_delimiter
from csvview.document import CSV, EnumeratedCSV, NamedCSV
from csvview.parser.tokenizer import parse
from csvview.serializer import serialize
from csvview.views import Column, NamedRow

__version__ = "0.1.0"

__all__ = [
    "CSV",
    "EnumeratedCSV",
    "NamedCSV",
    "Column",
    "NamedRow",
    "Delimiter",
    "guess_delimiter",
    "parse",
    "serialize",
    # Errors
    "CSVError",
    "ParseError",
    "ParseErrorReason",
    "FieldLookupError",
    "InvalidDelimiterError",
    "ConfigError",
]
