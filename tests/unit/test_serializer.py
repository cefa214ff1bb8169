# tests/unit/test_serializer.py
"""Tests for serializing tables back to text."""

import csv
import io

import pytest

from csvview.parser.tokenizer import parse
from csvview.serializer import enquote_if_needed, serialize, serialize_row

pytestmark = pytest.mark.tier1


class TestEnquote:
    """Tests for enquote_if_needed."""

    def test_plain_field_bare(self):
        assert enquote_if_needed("plain", ",") == "plain"

    def test_delimiter_quoted(self):
        assert enquote_if_needed("has,comma", ",") == '"has,comma"'

    def test_quote_doubled(self):
        assert enquote_if_needed('say "hi"', ",") == '"say ""hi"""'

    @pytest.mark.parametrize("field", ["x\ny", "x\ry", "x\r\ny"])
    def test_line_breaks_quoted(self, field):
        assert enquote_if_needed(field, ",") == f'"{field}"'

    def test_other_delimiter_characters_bare(self):
        """Test that only the active delimiter triggers quoting."""
        assert enquote_if_needed("has,comma", ";") == "has,comma"
        assert enquote_if_needed("a;b", ";") == '"a;b"'

    def test_empty_field_bare(self):
        assert enquote_if_needed("", ",") == ""


class TestSerialize:
    """Tests for serialize."""

    def test_requoting_row(self):
        """Test that only fields that need it are quoted."""
        text = serialize(["a", "b"], [["has,comma", "plain"]], ",")

        assert text == 'a,b\n"has,comma",plain\n'

    def test_every_line_terminated(self):
        assert serialize(["a"], [["1"], ["2"]], ",") == "a\n1\n2\n"

    def test_custom_line_terminator(self):
        assert serialize(["a", "b"], [["1", "2"]], ";", line_terminator="\r\n") == "a;b\r\n1;2\r\n"

    def test_empty_table(self):
        assert serialize([], [], ",") == ""

    def test_header_only(self):
        assert serialize(["a", "b"], [], "\t") == "a\tb\n"

    @pytest.mark.parametrize("terminator", ["\n", "\r\n", "\r"])
    def test_line_breaks_quoted_for_any_terminator(self, terminator):
        """Test that CR and LF inside fields are quoted whatever the line ending."""
        text = serialize(["a", "b"], [["x\ry", "x\ny"]], ",", line_terminator=terminator)

        assert text == f'a,b{terminator}"x\ry","x\ny"{terminator}'

    def test_reads_back_with_stdlib_csv(self):
        """Test that the output is ordinary CSV for csv.reader too."""
        rows = [["has,comma", 'say "hi"'], ["multi\nline", ""]]

        text = serialize(["a", "b"], rows, ",")

        assert list(csv.reader(io.StringIO(text, newline=""))) == [["a", "b"]] + rows

    def test_single_empty_field_row(self):
        """Test that a lone empty field is written as "" so it is not read back as a blank line."""
        assert serialize_row([""], ",") == '""'
        assert serialize(["a"], [[""]], ",") == 'a\n""\n'


class TestRoundTrip:
    """parse(serialize(parse(text))) == parse(text)."""

    @pytest.mark.parametrize(
        "text,delimiter",
        [
            ("a,b,c\n1,2,3\n4,5,6", ","),
            ('name,quote\nAlice,"she said ""hi"""\n', ","),
            ('a,b\n"x,y",z\n"multi\nline",""\n', ","),
            ("a;b\n1,5;2\n", ";"),
            ('a\tb\n"tab\tinside"\t2\r\n3\t4\r\n', "\t"),
            ('only\n""\nx\n', ","),
            ("a,b,c\n1\n1,2,3,4\n", ","),
        ],
    )
    def test_round_trip(self, text, delimiter):
        rows = parse(text, delimiter)

        again = parse(serialize(rows[0], rows[1:], delimiter), delimiter)

        assert again == rows
