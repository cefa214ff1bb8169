# csvview/logging/logger.py
"""
Unified logging setup for csvview.

All modules use:
    from csvview.logging.logger import get_logger
    logger = get_logger(__name__)

Log namespaces follow module paths, so `csvview.parser.tokenizer` can be
silenced or raised independently of `csvview.cli`.
"""

from __future__ import annotations

import logging
import sys

DEFAULT_FORMAT = "[%(levelname)s] %(name)s - %(message)s"


def configure_logging(
    level: int = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    stream=sys.stderr,
) -> None:
    """
    Configure the package logging handler.

    Called once early in the application lifecycle (the CLI entrypoint).
    Safe to call multiple times - handler duplication is prevented.
    """
    root = logging.getLogger("csvview")
    if not root.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """
    Modules call this to get a logger.

    Example:
        logger = get_logger(__name__)

    Do NOT configure logging here - configuration happens in configure_logging().
    """
    return logging.getLogger(name)
