# csvview/config/__init__.py
"""Configuration schema and layered loading."""

from csvview.config.loader import deep_merge, load_config, load_defaults, load_yaml
from csvview.config.schema import CSVConfig, ViewKind

__all__ = [
    "CSVConfig",
    "ViewKind",
    "deep_merge",
    "load_config",
    "load_defaults",
    "load_yaml",
]
