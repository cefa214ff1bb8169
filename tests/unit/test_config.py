# tests/unit/test_config.py
"""Tests for configuration schema and layered loading."""

import pytest
from pydantic import ValidationError

from csvview.config.loader import CONFIG_ENV_VAR, deep_merge, load_config, load_defaults
from csvview.config.schema import CSVConfig, ViewKind
from csvview.core.exceptions import (
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
)


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestSchema:
    """Tests for CSVConfig validation."""

    pytestmark = pytest.mark.tier1

    def test_defaults(self):
        config = CSVConfig()

        assert config.delimiter is None
        assert config.load_columns is True
        assert config.row_limit is None
        assert config.view == ViewKind.ENUMERATED
        assert config.line_terminator == "\n"

    def test_delimiter_name_normalized(self):
        assert CSVConfig(delimiter="tab").delimiter == "\t"

    @pytest.mark.parametrize("delimiter", [",,", '"', "\n"])
    def test_invalid_delimiter(self, delimiter):
        with pytest.raises(ValidationError):
            CSVConfig(delimiter=delimiter)

    def test_row_limit_must_be_positive(self):
        with pytest.raises(ValidationError):
            CSVConfig(row_limit=0)

    def test_unknown_view(self):
        with pytest.raises(ValidationError):
            CSVConfig(view="pivot")

    def test_line_terminator(self):
        assert CSVConfig(line_terminator="\r\n").line_terminator == "\r\n"
        with pytest.raises(ValidationError):
            CSVConfig(line_terminator=";")

    def test_extra_keys_rejected(self):
        with pytest.raises(ValidationError):
            CSVConfig(quotechar="'")


class TestDeepMerge:
    """Tests for deep_merge."""

    pytestmark = pytest.mark.tier1

    def test_nested(self):
        base = {"a": 1, "b": {"c": 2, "d": 3}}

        assert deep_merge(base, {"b": {"c": 10}}) == {"a": 1, "b": {"c": 10, "d": 3}}
        assert base == {"a": 1, "b": {"c": 2, "d": 3}}

    def test_lists_replaced(self):
        assert deep_merge({"a": [1, 2]}, {"a": [3]}) == {"a": [3]}


class TestLoadConfig:
    """Tests for load_config."""

    pytestmark = pytest.mark.tier2

    def test_package_defaults_match_schema(self):
        assert load_config() == CSVConfig()
        assert set(load_defaults()) == set(CSVConfig.model_fields)

    def test_user_override_section(self, write_file):
        path = write_file("csvview.yaml", "csvview:\n  delimiter: semicolon\n  row_limit: 5\n")

        config = load_config(path)

        assert config.delimiter == ";"
        assert config.row_limit == 5
        assert config.load_columns is True

    def test_user_override_flat(self, write_file):
        path = write_file("flat.yaml", "view: named\nload_columns: false\n")

        config = load_config(path)

        assert config.view == ViewKind.NAMED
        assert config.load_columns is False

    def test_env_var(self, write_file, monkeypatch):
        path = write_file("env.yaml", "encoding: latin-1\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

        assert load_config().encoding == "latin-1"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigNotFoundError, match="nope.yaml"):
            load_config(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, write_file):
        path = write_file("bad.yaml", "delimiter: [1, 2\n")

        with pytest.raises(ConfigParseError):
            load_config(path)

    def test_root_must_be_mapping(self, write_file):
        path = write_file("list.yaml", "- a\n- b\n")

        with pytest.raises(ConfigParseError):
            load_config(path)

    def test_validation_error(self, write_file):
        path = write_file("invalid.yaml", "row_limit: 0\n")

        with pytest.raises(ConfigValidationError):
            load_config(path)
