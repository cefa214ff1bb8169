# csvview/views/__init__.py
"""Table views built over parsed rows."""

from csvview.views.base import CSVView
from csvview.views.enumerated import Column, EnumeratedView
from csvview.views.named import NamedRow, NamedView

__all__ = [
    "CSVView",
    "Column",
    "EnumeratedView",
    "NamedRow",
    "NamedView",
]
