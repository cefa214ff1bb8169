# tests/conftest.py
"""
Root conftest - shared fixtures for csvview tests.

Test Tiers:
- tier1: Pure logic, no I/O (tokenizer, views, serializer, config schema)
         Run: pytest -m tier1
- tier2: Filesystem, package resources and CLI
         Run: pytest -m "tier1 or tier2"
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

RESOURCE_PACKAGE = "csvview_test_resources"

PEOPLE_CSV = "id,name,city\n1,Alice,Paris\n2,Bob,Berlin\n"
BROKEN_CSV = 'id,name\n1,"never closed\n'


@pytest.fixture
def write_file(tmp_path):
    """Factory writing text (or bytes) to a file under tmp_path."""

    def _write(name: str, content, encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding=encoding, newline="")
        return path

    return _write


@pytest.fixture(scope="session")
def resource_package(tmp_path_factory):
    """An importable package shipping CSV data files."""
    root = tmp_path_factory.mktemp("resources")
    package_dir = root / RESOURCE_PACKAGE
    package_dir.mkdir()
    (package_dir / "__init__.py").write_text("")
    (package_dir / "people.csv").write_text(PEOPLE_CSV, newline="")
    (package_dir / "broken.csv").write_text(BROKEN_CSV, newline="")
    (package_dir / "scores.tsv").write_text("player\tscore\nann\t3\n", newline="")

    sys.path.insert(0, str(root))
    yield RESOURCE_PACKAGE
    sys.path.remove(str(root))
    sys.modules.pop(RESOURCE_PACKAGE, None)
