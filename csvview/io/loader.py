# csvview/io/loader.py
"""
Text loading for the CSV facade.

This is the only module that touches the filesystem. It returns decoded text
and lets OSError / UnicodeDecodeError propagate unchanged; parsing errors are
never raised from here.
"""

from __future__ import annotations

from importlib import resources
from pathlib import Path
from typing import Optional, Union

from csvview.logging.logger import get_logger
from csvview.logging.tags import LOADER

logger = get_logger(__name__)


def read_text(path: Union[str, Path], encoding: str = "utf-8") -> str:
    """
    Read a whole file as text.

    Line endings are left as they are in the file; the tokenizer handles
    \\n, \\r\\n and \\r itself.
    """
    p = Path(path)
    with p.open("r", encoding=encoding, newline="") as f:
        text = f.read()
    logger.debug(f"{LOADER} Read {len(text)} characters from {p}")
    return text


def find_resource(package: str, name: str, extension: Optional[str] = None):
    """
    Locate a data file shipped inside an importable package.

    Args:
        package: Dotted package name holding the resource
        name: Resource file name without extension
        extension: File extension with or without the leading dot;
            None matches the first file (sorted by name) whose stem is `name`

    Returns:
        A Traversable for the resource, or None if there is no such file
    """
    root = resources.files(package)

    if extension is not None:
        candidate = root / f"{name}.{extension.lstrip('.')}"
        return candidate if candidate.is_file() else None

    matches = sorted(
        (entry for entry in root.iterdir() if entry.is_file() and Path(entry.name).stem == name),
        key=lambda entry: entry.name,
    )
    if not matches:
        logger.debug(f"{LOADER} No resource {name!r} in {package}")
        return None
    return matches[0]


def read_resource(
    package: str,
    name: str,
    extension: Optional[str] = None,
    encoding: str = "utf-8",
) -> Optional[str]:
    """Read a package resource as text; None if the resource does not exist."""
    resource = find_resource(package, name, extension)
    if resource is None:
        return None
    with resource.open("r", encoding=encoding, newline="") as f:
        text = f.read()
    logger.debug(f"{LOADER} Read resource {resource.name} from {package}")
    return text


__all__ = ["read_text", "find_resource", "read_resource"]
