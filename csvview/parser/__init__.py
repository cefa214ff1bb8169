# csvview/parser/__init__.py
"""Delimited-text tokenizer."""

from csvview.parser.tokenizer import ParserState, iter_rows, parse

__all__ = [
    "ParserState",
    "iter_rows",
    "parse",
]
