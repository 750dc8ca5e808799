"""Tests for RFC 4180 CSV field quoting."""

import io

import pytest

from escapist.csv import escape_csv, escape_csv_to, unescape_csv, unescape_csv_to
from escapist.shared.errors import InvalidArgumentError


class TestEscapeCsv:
    """Test CSV escaping."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("a b", '"a b"'),
            ("a,b", '"a,b"'),
            ("value,with,commas", '"value,with,commas"'),
            ('He said ""hi"""', '"He said """"hi"""""""'),
            ('say "hi"', '"say ""hi"""'),
            ('"', '""""'),
            ("line\nbreak", '"line\nbreak"'),
            ("é", '"é"'),
        ],
    )
    def test_quoted(self, text, expected):
        """Test that non-alphanumeric fields are quoted."""
        assert escape_csv(text) == expected

    @pytest.mark.parametrize("text", ["abc", "ABC123", ""])
    def test_alphanumeric_identity(self, text):
        """Test that alphanumeric fields are returned unchanged."""
        assert escape_csv(text) is text

    def test_none(self):
        """Test None passthrough."""
        assert escape_csv(None) is None


class TestUnescapeCsv:
    """Test CSV unescaping."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ('"a b"', "a b"),
            ('"say ""hi"""', 'say "hi"'),
            ('""', ""),
            ('""""', '"'),
            ('"a"b"', 'a"b'),
        ],
    )
    def test_quoted(self, text, expected):
        """Test quote stripping and undoubling."""
        assert unescape_csv(text) == expected

    @pytest.mark.parametrize("text", ["abc", '"abc', 'abc"', '"', 'a""b'])
    def test_unquoted_identity(self, text):
        """Test that fields not enclosed in quotes are returned unchanged."""
        assert unescape_csv(text) is text

    def test_round_trip(self):
        """Test that unescape reverses escape."""
        for text in ['a "b", c', '""', "x\r\ny", "plain"]:
            assert unescape_csv(escape_csv(text)) == text


class TestCsvWriters:
    """Test the writer variants."""

    def test_escape_to_window(self):
        """Test that quotes enclose only the window."""
        out = io.StringIO()
        escape_csv_to("xa,by", 1, 3, out)
        assert out.getvalue() == '"a,b"'

    def test_escape_to_unchanged(self):
        """Test that an alphanumeric window is written without quotes."""
        out = io.StringIO()
        escape_csv_to(list("ab,cd"), 3, 2, out)
        assert out.getvalue() == "cd"

    def test_unescape_to_window(self):
        """Test that enclosing quotes are judged on the window."""
        out = io.StringIO()
        unescape_csv_to('x"a""b"y', 1, 6, out)
        assert out.getvalue() == 'a"b'

    def test_writer_required(self):
        """Test that a None writer is rejected."""
        with pytest.raises(InvalidArgumentError):
            escape_csv_to("a", 0, 1, None)
