# csvview/views/base.py
"""
Contract shared by the table views.

A view is built once from the document text and never mutated afterwards:
rows and columns are read-only properties over immutable containers.

Flow: text → iter_rows(start_at=1) → View.rows / View.columns
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence, runtime_checkable


@runtime_checkable
class CSVView(Protocol):
    """
    Protocol for table views.

    Implementations:
    - EnumeratedView: rows and columns addressed by position
    - NamedView: rows and columns addressed by header name
    """

    def __init__(
        self,
        header: Sequence[str],
        text: str,
        delimiter: str,
        load_columns: bool = True,
        row_limit: Optional[int] = None,
    ) -> None:
        ...

    @property
    def rows(self) -> Sequence[Any]:
        ...

    @property
    def columns(self) -> Optional[Any]:
        """None when load_columns was False."""
        ...

    def serialize(self, header: Sequence[str], delimiter: str, line_terminator: str = "\n") -> str:
        """Render the view back to delimited text."""
        ...


__all__ = ["CSVView"]
