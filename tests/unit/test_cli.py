# tests/unit/test_cli.py
"""Tests for the csvview command line."""

import logging

import pytest
from typer.testing import CliRunner

from csvview.cli.cli import app
from csvview.config.loader import CONFIG_ENV_VAR

pytestmark = pytest.mark.tier2

runner = CliRunner()


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


@pytest.fixture
def people(write_file):
    return write_file("people.csv", "name;age\nAlice;30\nBob;25\n")


class TestShow:
    """Tests for `csvview show`."""

    def test_show(self, people):
        result = runner.invoke(app, ["show", str(people)])

        assert result.exit_code == 0
        assert "name" in result.output
        assert "Alice" in result.output
        assert "semicolon" in result.output

    def test_show_named_with_limit(self, people):
        result = runner.invoke(app, ["show", str(people), "--named", "--limit", "1"])

        assert result.exit_code == 0
        assert "Alice" in result.output
        assert "Bob" not in result.output

    def test_show_warns_when_limit_reached(self, people):
        result = runner.invoke(app, ["show", str(people), "--limit", "1"])

        assert result.exit_code == 0
        assert "Row limit reached: showing 1 rows" in result.output

    def test_show_no_warning_below_limit(self, people):
        result = runner.invoke(app, ["show", str(people), "--limit", "5"])

        assert result.exit_code == 0
        assert "Row limit reached" not in result.output

    def test_show_brackets_literal(self, write_file):
        path = write_file("markup.csv", "tag\n[bold]x[/bold]\n")

        result = runner.invoke(app, ["show", str(path)])

        assert result.exit_code == 0
        assert "[bold]x[/bold]" in result.output

    def test_show_malformed(self, write_file):
        path = write_file("broken.csv", 'a,b\n1,"open\n')

        result = runner.invoke(app, ["show", str(path)])

        assert result.exit_code == 1

    def test_show_missing_file(self, tmp_path):
        result = runner.invoke(app, ["show", str(tmp_path / "nope.csv")])

        assert result.exit_code == 1

    def test_show_invalid_limit(self, people):
        result = runner.invoke(app, ["show", str(people), "--limit", "0"])

        assert result.exit_code == 1

    def test_show_with_config(self, people, write_file):
        config = write_file("csvview.yaml", "csvview:\n  delimiter: comma\n")

        result = runner.invoke(app, ["show", str(people), "--config", str(config)])

        assert result.exit_code == 0
        assert "comma" in result.output


class TestColumns:
    """Tests for `csvview columns`."""

    def test_columns(self, write_file):
        path = write_file("data.csv", "id,note\n1,\n2,x\n")

        result = runner.invoke(app, ["columns", str(path)])

        assert result.exit_code == 0
        assert "id" in result.output
        assert "note" in result.output


class TestGuess:
    """Tests for `csvview guess`."""

    def test_guess(self, people):
        result = runner.invoke(app, ["guess", str(people)])

        assert result.exit_code == 0
        assert result.output.strip() == "semicolon"

    def test_guess_tab(self, write_file):
        path = write_file("data.tsv", "a\tb\n")

        result = runner.invoke(app, ["guess", str(path)])

        assert result.output.strip() == "tab"


class TestConvert:
    """Tests for `csvview convert`."""

    def test_convert_to_stdout(self, people):
        result = runner.invoke(app, ["convert", str(people), "--to", "tab"])

        assert result.exit_code == 0
        assert result.output == "name\tage\nAlice\t30\nBob\t25\n"

    def test_convert_requotes(self, write_file):
        path = write_file("semi.csv", "a;b\n1,5;2\n")

        result = runner.invoke(app, ["convert", str(path), "-d", ";"])

        assert result.exit_code == 0
        assert result.output == 'a,b\n"1,5",2\n'

    def test_convert_to_file(self, people, tmp_path):
        target = tmp_path / "out.csv"

        result = runner.invoke(app, ["convert", str(people), "--output", str(target)])

        assert result.exit_code == 0
        assert target.read_text() == "name,age\nAlice,30\nBob,25\n"

    def test_convert_invalid_target(self, people):
        result = runner.invoke(app, ["convert", str(people), "--to", "pipes"])

        assert result.exit_code == 1


class TestGlobalOptions:
    """Tests for options taken before the command name."""

    def test_verbose_before_command(self, people):
        result = runner.invoke(app, ["-v", "show", str(people)])

        assert result.exit_code == 0
        assert logging.getLogger("csvview").level == logging.DEBUG

        runner.invoke(app, ["show", str(people)])
        assert logging.getLogger("csvview").level == logging.WARNING

    def test_verbose_is_not_a_show_option(self, people):
        result = runner.invoke(app, ["show", str(people), "--verbose"])

        assert result.exit_code == 2


def test_no_args_shows_help():
    result = runner.invoke(app, [])

    assert "Usage" in result.output
