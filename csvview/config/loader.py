# csvview/config/loader.py
"""
Layered configuration loading.

Merge strategy:
    1. Package defaults (csvview/config/default.yaml) - always loaded
    2. User config (explicit path, or $CSVVIEW_CONFIG) - overrides defaults

Usage:
    from csvview.config.loader import load_config

    config = load_config()                  # defaults only
    config = load_config("my_csvview.yaml")  # defaults + overrides
    config.delimiter, config.row_limit
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from csvview.config.schema import CSVConfig
from csvview.core.exceptions import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
)
from csvview.logging.logger import get_logger
from csvview.logging.tags import CONFIG

logger = get_logger(__name__)

CONFIG_ENV_VAR = "CSVVIEW_CONFIG"
CONFIG_SECTION = "csvview"


def _get_defaults_path() -> Path:
    return Path(__file__).parent / "default.yaml"


# =============================================================================
# Deep Merge
# =============================================================================


def deep_merge(base: dict, override: dict) -> dict:
    """
    Deep merge two dictionaries.

    Values from `override` take precedence over `base`. Nested dicts are
    merged recursively; lists are replaced entirely.

    Examples:
        >>> deep_merge({"a": 1, "b": {"c": 2, "d": 3}}, {"b": {"c": 10}})
        {'a': 1, 'b': {'c': 10, 'd': 3}}
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


# =============================================================================
# Loading Functions
# =============================================================================


def load_yaml(path: Union[str, Path]) -> dict[str, Any]:
    """
    Load a YAML file as a dictionary.

    Raises:
        ConfigNotFoundError: If the file doesn't exist
        ConfigParseError: If the YAML is invalid or not a mapping
    """
    p = Path(path)

    if not p.exists():
        raise ConfigNotFoundError("Config file not found", path=p)

    if p.is_dir():
        raise ConfigError("Config path is a directory, not a file", path=p)

    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML syntax: {e}", path=p) from e

    if not isinstance(data, dict):
        raise ConfigParseError("Config root must be a mapping (dict)", path=p)

    logger.debug(f"{CONFIG} Loaded config from {p}")
    return data


def _unwrap(data: dict[str, Any], path: Path) -> dict[str, Any]:
    """Accept both `csvview: {...}` and a flat mapping."""
    if CONFIG_SECTION in data:
        section = data[CONFIG_SECTION] or {}
        if not isinstance(section, dict):
            raise ConfigParseError(f"'{CONFIG_SECTION}' must be a mapping", path=path)
        return section
    return data


def load_defaults() -> dict[str, Any]:
    """Load the package defaults as a flat dictionary."""
    path = _get_defaults_path()
    return _unwrap(load_yaml(path), path)


def load_config(path: Optional[Union[str, Path]] = None) -> CSVConfig:
    """
    Load defaults, merge user overrides and validate.

    Args:
        path: User config file. If None, $CSVVIEW_CONFIG is used when set.

    Returns:
        Validated CSVConfig

    Raises:
        ConfigNotFoundError: If the user config file doesn't exist
        ConfigParseError: If a file is not valid YAML
        ConfigValidationError: If the merged config doesn't match the schema
    """
    data = load_defaults()

    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR) or None

    source: Optional[Path] = None
    if path is not None:
        source = Path(path)
        data = deep_merge(data, _unwrap(load_yaml(source), source))

    try:
        config = CSVConfig(**data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid configuration: {e}", path=source) from e

    logger.debug(f"{CONFIG} Using config: {config.model_dump()}")
    return config


__all__ = [
    "CONFIG_ENV_VAR",
    "deep_merge",
    "load_yaml",
    "load_defaults",
    "load_config",
]
