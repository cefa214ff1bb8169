# csvview/io/__init__.py
"""File and package-resource loading."""

from csvview.io.loader import find_resource, read_resource, read_text

__all__ = ["read_text", "find_resource", "read_resource"]
