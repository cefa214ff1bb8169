# csvview/cli/__init__.py
"""Command-line interface."""

from csvview.cli.cli import app

__all__ = ["app"]
