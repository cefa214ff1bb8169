# csvview/logging/__init__.py
"""Logging helpers shared by every csvview module."""

from csvview.logging.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
